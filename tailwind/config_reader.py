"""
Tailwind Config Reader Module
Reads the class prefix from a Tailwind CSS configuration file.
"""

import json
import logging
import subprocess
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = 'tailwind.config.js'

# Loads CommonJS and ESM configs alike and prints the exported object as JSON
NODE_SCRIPT_TEMPLATE = """
const {{ pathToFileURL }} = require('url');
import(pathToFileURL({path}).href)
    .then((mod) => {{
        const config = mod.default ?? mod;
        console.log(JSON.stringify(config));
    }})
    .catch((err) => {{
        console.error(err && err.stack ? err.stack : String(err));
        process.exit(1);
    }});
"""


class TailwindConfigError(Exception):
    """Raised when a Tailwind config file exists but can't be evaluated."""


class TailwindConfigReader:
    def __init__(self, node_executable: str = 'node'):
        self.node_executable = node_executable
        self.config = {}

    def parse_config(self, config_path: Path) -> Dict[str, Any]:
        """Evaluate tailwind.config.js using Node.js and return it as a dict."""
        node_script = NODE_SCRIPT_TEMPLATE.format(path=json.dumps(str(config_path)))
        try:
            result = subprocess.run(
                [self.node_executable, '-e', node_script],
                capture_output=True,
                text=True,
                check=True,
                cwd=str(config_path.parent),
            )
        except FileNotFoundError as e:
            raise TailwindConfigError(f"Node.js executable '{self.node_executable}' not found") from e
        except subprocess.CalledProcessError as e:
            raise TailwindConfigError(f"Failed to evaluate {config_path}: {e.stderr.strip()}") from e

        try:
            return json.loads(result.stdout.strip() or '{}')
        except json.JSONDecodeError as e:
            raise TailwindConfigError(f"Config {config_path} did not serialize to JSON: {e}") from e

    def read_config(self, config_path: str | Path = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
        """Read and parse a Tailwind config file. A missing file yields an empty config."""
        path = Path(config_path).resolve()
        if not path.is_file():
            logger.warning(f"Tailwind config not found at {path}, assuming no prefix")
            self.config = {}
            return self.config

        if path.suffix == '.json':
            with open(path, 'r', encoding='utf-8') as f:
                try:
                    config = json.load(f)
                except json.JSONDecodeError as e:
                    raise TailwindConfigError(f"Invalid JSON in {path}: {e}") from e
        else:
            config = self.parse_config(path)

        self.config = config if isinstance(config, dict) else {}
        logger.debug(f"Parsed config from {path}: {self.config}")
        return self.config

    def get_prefix(self, config: Optional[Dict[str, Any]] = None) -> str:
        """Return the configured prefix, or '' when none is set."""
        config = self.config if config is None else config
        prefix = config.get('prefix')
        return prefix if isinstance(prefix, str) else ''
