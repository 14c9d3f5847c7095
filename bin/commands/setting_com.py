#!/usr/bin/env python3

from libnm import command_index

def _help():
    print('nginx-manager setting (list|get) [example_key]  # List out all settings or just the value of one setting')
    print('nginx-manager setting set example_key example_value  # Set the value of a setting')
index = command_index.CategoryIndex('setting', _help)

def _setting(action, more):
    from libnm import settings
    if action == False or action == 'list':
        from tabulate import tabulate
        table = []
        all_settings = settings.all_settings()
        for key in all_settings:
            table.append([ key, all_settings[key] ])
        print()
        print(tabulate(table, ['Key', 'Value']))
        print()
        return True
    if action == 'get':
        if more == False:
            print('Please provide a key')
            return False
        print(str(settings.all_settings().get(more[0], '')))
        return True
    if action == 'set':
        if more == False:
            print('Please provide a key and value')
            return False
        if len(more) < 2:
            print('Please provide the new value')
            return False
        settings.set(more[0], more[1])
        return True
    print('Unknown setting action: ' + action)
    return False
index.register_command('setting', _setting)
index.register_command('settings', _setting)
