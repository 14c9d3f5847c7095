#!/usr/bin/env python3

install_path = '/opt/nginx-manager/'

import os
from libnm import file_filter

_settings_dict = False

def config_file():
    """
    Get the full path of the settings file.
    """
    return install_path + 'etc/config'

def get(setting_name):
    """
    Get the setting value for a given key.
    The value is stripped of head and tail white space.
    The settings file is only read the first time this function is called.
    Subsequent calls reach into a cached dictionary of values.

    Args:
        setting_name - The index key to look up the setting.
    """
    if(_settings_dict == False):
        _populate_settings()
    return _settings_dict[setting_name]

def set(setting_name, value):
    """
    Set the setting value for a given key.

    Args:
        setting_name - The index key for the setting.
        value - The new value for the setting.
    """
    global _settings_dict
    if(_settings_dict != False):
        _settings_dict[setting_name] = value
    UpdateSetting(setting_name, value).run()

def get_bool(setting_name):
    """
    Same as get(setting_name), but converts the return value to a boolean value.

    Args:
        setting_name - The index key to look up the setting.
    """
    setting = get(setting_name)
    if setting == True:
        return True
    if setting == False:
        return False
    setting = setting.lower()
    return setting == 'true' \
        or setting == '1' \
        or setting == 'on' \
        or setting == 'yes'

def get_int(setting_name):
    """
    Same as get(setting_name), but converts the return value to an integer.

    Args:
        setting_name - The index key to look up the setting.
    """
    return int(get(setting_name))

def all_settings():
    """
    Get a copy of every setting currently in effect.
    """
    if(_settings_dict == False):
        _populate_settings()
    return dict(_settings_dict)

def reset():
    """
    Forget cached values so the next get() reads the settings file again.
    """
    global _settings_dict
    _settings_dict = False

class UpdateSetting(file_filter.FileFilter):
    """A FileFilter to change a setting."""
    def __init__(self, name, value):
        self.setting_name = name
        self.setting_value = str(value)
        super().__init__(config_file())

    def filter_stream(self, in_stream, out_stream):
        added_line = False
        new_line = self.setting_name + ': ' + self.setting_value + '\n'
        for line in in_stream:
            index = line.find(':')
            if index != -1:
                name = line[:index].lower().strip()
                if name == self.setting_name:
                    line = new_line
                    added_line = True
            out_stream.write(line)
        if not added_line:
            out_stream.write(new_line)
        return True

def _populate_settings():
    """
    Returns a dictionary populated with the current settings.
    """
    global _settings_dict
    _settings_dict = _get_default_settings()
    if os.path.exists(config_file()):
        with open(config_file()) as config:
            for line in config:
                index = line.find(':')
                if index != -1:
                    name = line[:index].lower().strip()
                    value = line[index+1:].strip()

                    # skip comments
                    if not name.startswith('#'):

                        # apply the setting from the line
                        _settings_dict[name] = value
    else:
        _autodetect_defaults()

def _autodetect_defaults():
    # root does not need sudo
    if hasattr(os, 'getuid') and os.getuid() == 0:
        _settings_dict['use_sudo'] = False

def _get_default_settings():
    """
    Returns a dictionary populated with the default settings.
    """
    return {
        'sites_available': '/etc/nginx/sites-available',
        'sites_enabled': '/etc/nginx/sites-enabled',
        'template_dir': '',

        'nginx_binary': 'nginx',
        'nginx_service': 'nginx',
        'certbot_binary': 'certbot',
        'use_sudo': True,

        'default_web_root': '/var/www/',
        'default_php_version': '8.2',
        'default_port': '3000',

        'log_file': '',
        'compact_help': False
    }
