import pytest

import nginx_manager
from libnm import command_index, input_util, menu, settings
from libnm.site import SiteType
from commands import cert_com, nginx_com, setting_com, site_com


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, 'install_path', str(tmp_path) + '/')
    settings.reset()
    yield
    settings.reset()


@pytest.fixture
def answers(monkeypatch):
    """Script the interactive prompts. Each list is consumed in order."""
    scripted = {'select': [], 'text': [], 'confirm': [], 'domain': [], 'port': [], 'email': []}
    monkeypatch.setattr(input_util, 'select_from', lambda message, options: scripted['select'].pop(0))
    monkeypatch.setattr(input_util, 'prompt_value', lambda key, value: scripted['text'].pop(0) or value)
    monkeypatch.setattr(input_util, 'confirm', lambda text, default=True: scripted['confirm'].pop(0))
    monkeypatch.setattr(input_util, 'input_domain', lambda: scripted['domain'].pop(0))
    monkeypatch.setattr(input_util, 'input_port', lambda default: scripted['port'].pop(0))
    monkeypatch.setattr(input_util, 'input_email', lambda: scripted['email'].pop(0))
    return scripted


def test_interactive_create_static_site(env, runner, answers):
    answers['select'] = [SiteType.STATIC]
    answers['domain'] = ['blog.test']
    answers['text'] = ['']
    answers['confirm'] = [False, False, True]
    assert site_com._create(False, False)
    with open(env.registry.available_path('blog.test')) as f:
        content = f.read()
    assert 'root /var/www/blog.test;' in content
    assert runner.commands('certbot') == []


def test_create_with_arguments_skips_type_and_domain(env, runner, answers):
    answers['port'] = [5000]
    answers['confirm'] = [True, True, True]
    answers['email'] = ['ops@api.example.com']
    answers['select'] = [False]
    assert site_com._create('API.example.com', ['proxy'])
    with open(env.registry.available_path('api.example.com')) as f:
        content = f.read()
    assert 'server 127.0.0.1:5000;' in content
    assert 'server_name www.api.example.com;' in content
    assert runner.commands('certbot')[0][-3] == 'ops@api.example.com'


def test_create_cancelled_writes_nothing(env, runner, answers, capsys, output):
    answers['select'] = [SiteType.LARAVEL]
    answers['domain'] = ['shop.test']
    answers['text'] = ['', '8.3']
    answers['confirm'] = [False, False, False]
    assert not site_com._create(False, False)
    assert env.registry.names() == []
    assert runner.calls == []
    assert 'Operation cancelled.' in output.getvalue()
    assert '8.3' in capsys.readouterr().out


def test_list_shows_status(env, capsys):
    env.registry.write('b.test', 'x\n')
    env.registry.write('a.test', 'x\n')
    env.registry.disable('b.test')
    assert site_com._list() == [['a.test', 'enabled'], ['b.test', 'disabled']]
    out = capsys.readouterr().out
    assert 'a.test' in out and 'disabled' in out


def test_list_empty(env, capsys):
    assert site_com._list() == []
    assert 'No nginx sites found' in capsys.readouterr().out


def test_remove_unknown_site_is_reported(env, runner, output):
    assert not site_com._remove('missing.test')
    assert 'Site missing.test not found' in output.getvalue()
    assert runner.calls == []


def test_remove_confirmed(env, runner, answers):
    env.registry.write('a.test', 'x\n')
    answers['confirm'] = [True]
    assert site_com._remove('a.test')
    assert not env.registry.exists('a.test')
    assert runner.commands('systemctl') == [['systemctl', 'reload', 'nginx']]


def test_remove_declined_keeps_site(env, answers):
    env.registry.write('a.test', 'x\n')
    answers['confirm'] = [False]
    assert not site_com._remove('a.test')
    assert env.registry.exists('a.test')


def test_enable_checks_config_before_reload(env, runner):
    env.registry.write('a.test', 'x\n')
    env.registry.disable('a.test')
    runner.results['nginx'] = 1
    assert site_com._enable('a.test')
    assert env.registry.is_enabled('a.test')
    assert runner.commands('systemctl') == []


def test_disable_unknown_site(env, output):
    assert not site_com._disable('a.test')
    assert 'Unable to find an enabled site named a.test' in output.getvalue()


def test_ssl_for_existing_site(env, runner, answers):
    env.registry.write('a.test', 'x\n')
    answers['confirm'] = [True]
    assert cert_com._ssl('a.test', ['me@a.test'])
    assert ['-d', 'www.a.test'] == runner.commands('certbot')[0][4:6]
    assert runner.commands('systemctl') == [['systemctl', 'reload', 'nginx']]


def test_templates_lists_shipped_types(env):
    names = [row[0] for row in site_com._templates()]
    assert names == sorted(site_type.value for site_type in SiteType)


def test_nginx_commands(env, runner):
    assert nginx_com._test()
    assert nginx_com._reload()
    assert runner.commands('nginx') == [['nginx', '-t']]


def test_setting_set_and_get(env, capsys):
    assert setting_com._setting('set', ['default_port', '8080'])
    settings.reset()
    assert settings.get('default_port') == '8080'
    assert setting_com._setting('get', ['default_port'])
    assert '8080' in capsys.readouterr().out
    assert not setting_com._setting('set', ['default_port'])
    assert not setting_com._setting('bogus', False)


def test_menu_dispatch(env, capsys):
    assert not menu.dispatch(menu.Command.EXIT)
    assert menu.dispatch(menu.Command.LIST)
    assert 'No nginx sites found' in capsys.readouterr().out


def test_main_menu_loops_until_exit(env, output, monkeypatch):
    choices = iter([menu.Command.LIST, menu.Command.TEST, menu.Command.EXIT])
    monkeypatch.setattr(menu, 'choose_command', lambda: next(choices))
    pauses = []
    monkeypatch.setattr('builtins.input', lambda prompt: pauses.append(prompt))
    menu.main_menu(env.log)
    assert len(pauses) == 2
    assert 'Goodbye!' in output.getvalue()
    assert '✓ Goodbye!' not in output.getvalue()


def test_run_main_unknown_argument_prints_usage(env, capsys):
    assert nginx_manager.run_main(['bogus']) == 0
    out = capsys.readouterr().out
    assert out.startswith('Usage: nginx-manager [')
    assert 'create' in out and 'reload' in out
    assert 'Run without arguments for interactive mode.' in out


def test_run_main_dispatches_list(env, capsys):
    env.registry.write('a.test', 'x\n')
    assert nginx_manager.run_main(['LIST']) == 0
    assert 'a.test' in capsys.readouterr().out


def test_run_main_requires_nginx(env, runner, output, monkeypatch):
    monkeypatch.setattr('libnm.system.is_installed', lambda binary: False)
    assert nginx_manager.run_main(['list']) == 1
    assert 'nginx is not installed' in output.getvalue()
    assert runner.calls == []


def test_help_lists_categories(env, capsys):
    assert nginx_manager.run_main(['help', 'all']) == 0
    out = capsys.readouterr().out
    assert 'nginx-manager create' in out
    assert 'nginx-manager ssl' in out


def test_registered_commands():
    command_index.load_commands()
    names = command_index.sorted_command_list()
    for name in ['create', 'list', 'test', 'reload', 'remove', 'enable', 'disable', 'ssl']:
        assert name in names


def test_closed_stdin_is_a_clean_exit(env, output, monkeypatch):
    def closed(prompt):
        raise EOFError
    monkeypatch.setattr(menu, 'choose_command', lambda: menu.Command.LIST)
    monkeypatch.setattr('builtins.input', closed)
    assert nginx_manager.run_main([]) == 130
    assert 'Operation cancelled.' in output.getvalue()


def test_port_default_comes_from_settings_as_int(env, answers, monkeypatch):
    defaults = []
    monkeypatch.setattr(input_util, 'input_port', lambda default: defaults.append(default) or 4000)
    answers['text'] = ['']
    answers['confirm'] = [False, False, False]
    assert not site_com._create('app.test', ['nodejs'])
    assert defaults == [3000]
