#!/usr/bin/env python3

import importlib
import inspect

script_name = 'nginx-manager'

def load_commands():
    """
    Import every module in the commands package so that each one registers
    its commands.
    """
    import commands
    for name in commands.__all__:
        importlib.import_module('commands.' + name)

def sorted_command_list():
    """
    Compile a sorted list of every registered command name.
    """
    return sorted(set(com[0] for com in Index.index))

class Index():
    index = []
    help_index = []

    def register_command(self, command, function):
        """
        Register a new CLI command.

        Args:
            command - The command name
            function - When the command is called by the user, this function is
                called passed CLI arguments. The fist argument is passed as a
                stand-alone argument and all subsequent arguments are passed as
                an array.
        """
        command = command.strip().lower()
        for i in Index.index:
            if command == i[0]:
                return False
        Index.index.append([command, function])
        return True

    def register_help(self, category, help_function):
        """
        Register the help function for a new CLI category.

        Args:
            category - The name of the category
            help_function - The function to print the help message for the given
                category
        """
        category = category.strip().lower()
        for i in Index.help_index:
            if category == i[0]:
                return False
        Index.help_index.append([category, help_function])
        Index.help_index = sorted(Index.help_index, key=lambda k: k[0])
        return True

    def find_command(self, command):
        command = command.strip().lower()
        for com in Index.index:
            if com[0] == command:
                return com[1]
        return False

    def run_command(self, command, args):
        """
        Run a registered command.

        Args:
            command - The name of the command
            args - An array of the remaining CLI arguments

        Return:
            False if the command is not registered
        """
        function = self.find_command(command)
        if function == False:
            self.run_usage()
            return False
        first = False
        more = False
        if len(args) > 0:
            first = args[0]
        if len(args) > 1:
            more = args[1:]
        sig = inspect.signature(function)
        params = len(sig.parameters)
        if params == 0:
            function()
        elif params == 1:
            function(first)
        elif params == 2:
            function(first, more)
        return True

    def run_usage(self):
        """
        Print the short usage message.
        """
        print('Usage: ' + script_name + ' [' + '|'.join(sorted_command_list()) + ']')
        print('Run without arguments for interactive mode.')

    def run_help(self, category):
        """
        Print help output.

        Args:
            category - Print help for this category (False for all categories)
        """
        from libnm import settings
        if not settings.get_bool('compact_help'):
            print()
            print('Commands have this syntax:')
            print(script_name + ' command arguments')
            print('[example] - optional argument that will trigger a prompt when omitted')
            print('Run ' + script_name + ' without arguments for the interactive menu.')
        print()
        has_printed = False
        for entry in Index.help_index:
            if category == False or category == 'all' or entry[0] == category.strip().lower():
                entry[1]()
                has_printed = True
        if not has_printed:
            print('Categories:')
            print()
            for entry in Index.help_index:
                print(entry[0])
        print()
        return has_printed

class CategoryIndex(Index):
    """
    A convinience class for registering multiple commands from the same
    category, while also requiring a help string for the category.
    """
    def __init__(self, category, help_text):
        """
        Create a new category along with it's help string.

        Args:
            category - The name of the new category
            help_text - The help output string for the category
        """
        self.category = category
        self.register_help(category, help_text)
