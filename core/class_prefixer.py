"""
Class Prefixer Module
Extracts Tailwind classes from className attributes and rewrites them with a prefix.
"""

import re
import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

# Quoted string literals inside an attribute region
LITERAL_REGEX = re.compile(r"""['"]([^'"]+)['"]""")

# A class is only rewritten when a quote or whitespace sits on both sides of it
BOUNDARY_BEFORE = r"""(?<=['"\s])"""
BOUNDARY_AFTER = r"""(?=['"\s])"""

Rule = Tuple[Callable[[str, str, Optional[str]], bool], Callable[[str, str, Optional[str]], str]]


def _has_old_prefix(cls: str, new_prefix: str, old_prefix: Optional[str]) -> bool:
    if not old_prefix:
        return False
    return (cls.startswith(old_prefix)
            or cls.startswith(f"-{old_prefix}")
            or cls.startswith(f"!{old_prefix}")
            or f":{old_prefix}" in cls)


def _replace_old_prefix(cls: str, new_prefix: str, old_prefix: Optional[str]) -> str:
    # First textual occurrence only, wherever it sits in the class
    return cls.replace(old_prefix, new_prefix, 1)


def _prefix_variant(cls: str, new_prefix: str, old_prefix: Optional[str]) -> str:
    if f":{new_prefix}" in cls:
        return cls
    variants, _, utility = cls.rpartition(':')
    return f"{variants}:{new_prefix}{utility}"


def _prefix_important(cls: str, new_prefix: str, old_prefix: Optional[str]) -> str:
    if f"!{new_prefix}" in cls:
        return cls
    return cls.replace('!', f"!{new_prefix}", 1)


def _prefix_negative(cls: str, new_prefix: str, old_prefix: Optional[str]) -> str:
    if cls.startswith(f"-{new_prefix}"):
        return cls
    return f"-{new_prefix}{cls[1:]}"


def _prefix_plain(cls: str, new_prefix: str, old_prefix: Optional[str]) -> str:
    if cls.startswith(new_prefix):
        return cls
    return f"{new_prefix}{cls}"


# Evaluated in order, first matching predicate wins
PREFIX_RULES: List[Rule] = [
    (_has_old_prefix, _replace_old_prefix),
    (lambda cls, new, old: ':' in cls, _prefix_variant),
    (lambda cls, new, old: '!' in cls, _prefix_important),
    (lambda cls, new, old: cls.startswith('-'), _prefix_negative),
    (lambda cls, new, old: True, _prefix_plain),
]


class ClassPrefixer:
    def __init__(self, attributes: Iterable[str] = ('className',)):
        self.attributes = list(attributes)
        attr_pattern = '|'.join(re.escape(attr) for attr in self.attributes)
        # className="..." | className='...' | className={'...'} | className={cn('...', ...)} | className={`...`}
        self.attribute_regex = re.compile(
            r"""(?:%s)=(?:"[^"]*"|'[^']*'|\{[cn({`]*[\s\S]*?[`'"})]+\})""" % attr_pattern,
            re.MULTILINE,
        )

    def extract_classes(self, content: str) -> Dict[str, str]:
        """Return the distinct classes found in the attribute regions of content, keyed by their text."""
        distinct_classes: Dict[str, str] = {}
        for region in self.attribute_regex.finditer(content):
            for literal in LITERAL_REGEX.findall(region.group(0)):
                for cls in literal.split():
                    cls = cls.replace("'", '').replace('"', '')
                    if cls and cls not in distinct_classes:
                        distinct_classes[cls] = cls
        return distinct_classes

    def prefix_class(self, cls: str, new_prefix: str, old_prefix: Optional[str] = None) -> str:
        """
        Compute the prefixed form of a single class.

        The old prefix, when present, is swapped for the new one. Otherwise the
        new prefix goes after the last variant colon, after the important marker,
        after the negative sign, or in front of the class, and is never added twice.
        """
        new_prefix = new_prefix or ''
        for applies, transform in PREFIX_RULES:
            if applies(cls, new_prefix, old_prefix):
                return transform(cls, new_prefix, old_prefix)
        return cls

    def update_classes(self, content: str, new_prefix: str, old_prefix: Optional[str] = None) -> str:
        """Rewrite every class found in className attributes of content. Never raises."""
        new_content = content
        classes = self.extract_classes(content)
        logger.debug(f"Found {len(classes)} distinct classes")
        for cls in classes:
            replacement = self.prefix_class(cls, new_prefix, old_prefix)
            if replacement == cls:
                continue
            class_regex = re.compile(BOUNDARY_BEFORE + re.escape(cls) + BOUNDARY_AFTER)
            new_content = class_regex.sub(lambda _match: replacement, new_content)
        return new_content
