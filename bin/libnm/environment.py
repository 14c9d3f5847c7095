#!/usr/bin/env python3

import os
from libnm import settings, logger, system, template
from libnm.registry import SiteRegistry
from libnm.nginx import Nginx
from libnm.cert import Certbot

shipped_template_dir = os.path.join(os.path.dirname(os.path.realpath(__file__)), 'nginx-templates')

def open_log_file(path):
    """
    Open the log file for appending. An unusable path is reported on the
    screen and logging to a file is turned off.

    Args:
        path - The log file path, or an empty string for no log file
    """
    if not path:
        return False
    try:
        return open(path, 'a')
    except OSError as e:
        logger.Log(False).warn('Unable to open log file ' + path + ': ' + str(e))
        return False

class Environment():
    """
    Everything a command needs to act on the server: the template store, the
    site registry, nginx, certbot and the output log. Tests build one with a
    fake runner instead of calling from_settings().
    """
    def __init__(self, templates, registry, nginx, certbot, log):
        self.templates = templates
        self.registry = registry
        self.nginx = nginx
        self.certbot = certbot
        self.log = log

    @classmethod
    def from_settings(cls):
        """
        Build an Environment from the current settings.
        """
        log = logger.Log(open_log_file(settings.get('log_file')))
        runner = system.Runner(settings.get_bool('use_sudo'))
        return cls(
            template.TemplateStore(template_dir()),
            SiteRegistry(settings.get('sites_available'), settings.get('sites_enabled'), runner),
            Nginx(runner, log, settings.get('nginx_binary'), settings.get('nginx_service')),
            Certbot(runner, log, settings.get('certbot_binary')),
            log
        )

def template_dir():
    """
    Get the folder holding the vhost templates.
    """
    folder = settings.get('template_dir')
    if folder:
        return folder
    return shipped_template_dir

_current = None

def get():
    """
    Get the shared Environment, building it from settings on first use.
    """
    global _current
    if _current is None:
        _current = Environment.from_settings()
    return _current

def use(env):
    """
    Replace the shared Environment.

    Args:
        env - The Environment to use, or None to rebuild from settings
    """
    global _current
    _current = env
