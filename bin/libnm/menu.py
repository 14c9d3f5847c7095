#!/usr/bin/env python3

from enum import Enum
from libnm import input_util

class Command(Enum):
    CREATE = 'create'
    LIST = 'list'
    REMOVE = 'remove'
    TEST = 'test'
    RELOAD = 'reload'
    EXIT = 'exit'

_menu_labels = [
    (Command.CREATE, 'Create new site configuration'),
    (Command.LIST, 'List existing sites'),
    (Command.REMOVE, 'Remove site'),
    (Command.TEST, 'Test nginx configuration'),
    (Command.RELOAD, 'Reload nginx'),
    (Command.EXIT, 'Exit'),
]

def dispatch(command):
    """
    Run the task for a menu command.

    Args:
        command - A Command

    Return:
        False when the menu should stop
    """
    from commands import site_com, nginx_com
    if command == Command.CREATE:
        site_com._create(False, False)
    elif command == Command.LIST:
        site_com._list()
    elif command == Command.REMOVE:
        site_com._remove(False)
    elif command == Command.TEST:
        nginx_com._test()
    elif command == Command.RELOAD:
        nginx_com._reload()
    elif command == Command.EXIT:
        return False
    return True

def choose_command():
    options = [(label, command) for command, label in _menu_labels]
    return input_util.select_from('Choose an option', options)

def main_menu(log):
    """
    Show the main menu until the user chooses to exit.

    Args:
        log - The Log to print the banner and goodbye message with
    """
    while True:
        log.banner('nginx-manager', 'Easy nginx configuration tool')
        if not dispatch(choose_command()):
            log.log('Goodbye!', style='green')
            return
        input('Press Enter to continue...')
