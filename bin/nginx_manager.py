#!/usr/bin/env python3

import sys
import os
from libnm import command_index, settings

index = command_index.Index()

def checkout_install_path(script_file):
    """
    Get the install path of a checkout, where this script sits in bin/ next
    to etc/. An installed package has no bin/ folder and keeps the default
    install path.

    Args:
        script_file - The path of this script
    """
    script_dir = os.path.dirname(os.path.realpath(script_file))
    if os.path.basename(script_dir) == 'bin':
        return os.path.dirname(script_dir) + '/'
    return False

if checkout_install_path(__file__):
    settings.install_path = checkout_install_path(__file__)

def run_main(argv=None):
    """
    Run the interactive menu, or a single command when one is given.

    Args:
        argv - (optional) The arguments after the program name

    Return:
        The process exit code
    """
    from libnm import environment, menu
    if argv is None:
        argv = sys.argv[1:]
    command_index.load_commands()

    env = environment.get()
    try:
        if not env.nginx.is_installed():
            env.log.error('nginx is not installed. Please install nginx first.')
            return 1
        if len(argv) == 0:
            menu.main_menu(env.log)
        else:
            primary = argv[0].lower()
            if index.find_command(primary) == False:
                index.run_usage()
            else:
                index.run_command(primary, argv[1:])
    except (KeyboardInterrupt, EOFError):
        print()
        env.log.warn('Operation cancelled.')
        return 130
    finally:
        env.log.close()
    return 0

def main():
    sys.exit(run_main())

if __name__ == '__main__':
    main()
