#!/usr/bin/env python3

from libnm import command_index

def _help():
    print('nginx-manager test  # Check the nginx configuration syntax')
    print('nginx-manager reload  # Reload the nginx configuration')
index = command_index.CategoryIndex('nginx', _help)

def _test():
    from libnm import environment
    return environment.get().nginx.test_config()
index.register_command('test', _test)

def _reload():
    from libnm import environment
    return environment.get().nginx.reload()
index.register_command('reload', _reload)
