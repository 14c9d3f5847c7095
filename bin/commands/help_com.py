#!/usr/bin/env python3

from libnm import command_index

def _help_help():
    print('nginx-manager help [category|all]  # This help page')
index = command_index.CategoryIndex('help', _help_help)

def _help(category):
    return index.run_help(category)
index.register_command('help', _help)
