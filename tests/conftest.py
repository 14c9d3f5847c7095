import io
import os

import pytest
from rich.console import Console

from libnm import environment, logger, template
from libnm.cert import Certbot
from libnm.environment import Environment
from libnm.nginx import Nginx
from libnm.registry import SiteRegistry

TEMPLATE_DIR = environment.shipped_template_dir


class FakeRunner():
    """Records every privileged command. File commands act on the real
    (temporary) filesystem, everything else returns a scripted exit code."""

    def __init__(self):
        self.calls = []
        self.results = {}

    def run_privileged(self, command, input_text=None):
        self.calls.append(list(command))
        name = command[0]
        if name == 'tee':
            with open(command[1], 'w') as out:
                out.write(input_text)
            return 0, input_text, ''
        if name == 'ln':
            source, target = command[-2], command[-1]
            if os.path.lexists(target):
                os.remove(target)
            os.symlink(source, target)
            return 0, '', ''
        if name == 'rm':
            if os.path.lexists(command[-1]):
                os.remove(command[-1])
            return 0, '', ''
        code = self.results.get(name, 0)
        return code, name + ' output', name + ' diagnostics' if code else ''

    def commands(self, name):
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def log(output):
    return logger.Log(False, Console(file=output, width=200, highlight=False))


@pytest.fixture
def registry(tmp_path, runner):
    available = tmp_path / 'sites-available'
    enabled = tmp_path / 'sites-enabled'
    available.mkdir()
    enabled.mkdir()
    return SiteRegistry(str(available), str(enabled), runner)


@pytest.fixture
def env(registry, runner, log, monkeypatch):
    monkeypatch.setattr('libnm.system.is_installed', lambda binary: True)
    current = Environment(
        template.TemplateStore(str(TEMPLATE_DIR)),
        registry,
        Nginx(runner, log),
        Certbot(runner, log),
        log,
    )
    environment.use(current)
    yield current
    environment.use(None)
