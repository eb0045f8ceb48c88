import sys
import os
import json
import subprocess
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from tailwind import config_reader
from tailwind.config_reader import TailwindConfigError, TailwindConfigReader

SAMPLE_CONFIG = {
    'prefix': 'tw-',
    'content': ['./src/**/*.{ts,tsx}'],
    'theme': {'extend': {'colors': {'primary': '#123456'}}}
}

class FakeCompletedProcess:
    def __init__(self, stdout):
        self.stdout = stdout
        self.stderr = ''
        self.returncode = 0

def test_read_config_missing_file(tmp_path):
    reader = TailwindConfigReader()
    assert reader.read_config(tmp_path / 'tailwind.config.js') == {}
    assert reader.get_prefix() == ''

def test_read_config_json(tmp_path):
    path = tmp_path / 'tailwind.config.json'
    path.write_text(json.dumps(SAMPLE_CONFIG), encoding='utf-8')
    reader = TailwindConfigReader()
    config = reader.read_config(path)
    assert config['theme']['extend']['colors']['primary'] == '#123456'
    assert reader.get_prefix() == 'tw-'

def test_read_config_invalid_json(tmp_path):
    path = tmp_path / 'tailwind.config.json'
    path.write_text('{"prefix": ', encoding='utf-8')
    with pytest.raises(TailwindConfigError):
        TailwindConfigReader().read_config(path)

def test_read_config_js_uses_node(tmp_path, monkeypatch):
    path = tmp_path / 'tailwind.config.js'
    path.write_text("export default { prefix: 'tw-' };\n", encoding='utf-8')
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append((cmd, kwargs))
        return FakeCompletedProcess(json.dumps(SAMPLE_CONFIG) + '\n')

    monkeypatch.setattr(config_reader.subprocess, 'run', fake_run)
    reader = TailwindConfigReader()
    reader.read_config(path)
    assert reader.get_prefix() == 'tw-'
    cmd, kwargs = calls[0]
    assert cmd[:2] == ['node', '-e']
    assert json.dumps(str(path.resolve())) in cmd[2]
    assert kwargs['cwd'] == str(path.resolve().parent)

def test_read_config_node_missing(tmp_path, monkeypatch):
    path = tmp_path / 'tailwind.config.js'
    path.write_text("module.exports = {};\n", encoding='utf-8')

    def fake_run(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(config_reader.subprocess, 'run', fake_run)
    with pytest.raises(TailwindConfigError, match='not found'):
        TailwindConfigReader().read_config(path)

def test_read_config_node_error(tmp_path, monkeypatch):
    path = tmp_path / 'tailwind.config.js'
    path.write_text("module.exports = {;\n", encoding='utf-8')

    def fake_run(cmd, **kwargs):
        raise subprocess.CalledProcessError(1, cmd, output='', stderr='SyntaxError: Unexpected token')

    monkeypatch.setattr(config_reader.subprocess, 'run', fake_run)
    with pytest.raises(TailwindConfigError, match='SyntaxError'):
        TailwindConfigReader().read_config(path)

def test_read_config_node_bad_output(tmp_path, monkeypatch):
    path = tmp_path / 'tailwind.config.js'
    path.write_text("module.exports = {};\n", encoding='utf-8')
    monkeypatch.setattr(config_reader.subprocess, 'run', lambda cmd, **kwargs: FakeCompletedProcess('not json'))
    with pytest.raises(TailwindConfigError):
        TailwindConfigReader().read_config(path)

def test_get_prefix_absent_or_empty():
    reader = TailwindConfigReader()
    assert reader.get_prefix({}) == ''
    assert reader.get_prefix({'prefix': None}) == ''
    assert reader.get_prefix({'prefix': ''}) == ''
    assert reader.get_prefix({'prefix': 'ui-'}) == 'ui-'
