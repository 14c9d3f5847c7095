#!/usr/bin/env python3

import os
import shutil
import subprocess

def is_root():
    """
    Check if the current process is running as root.
    """
    return hasattr(os, 'getuid') and os.getuid() == 0

def is_installed(binary):
    """
    Check if an executable can be found on the PATH or at the given path.

    Args:
        binary - The name or full path of the executable
    """
    return shutil.which(binary) is not None

class Runner():
    """
    Run commands that need elevated privileges. When use_sudo is set and the
    process is not already root, each command is prefixed with sudo.
    """
    def __init__(self, use_sudo=True):
        self.use_sudo = use_sudo and not is_root()

    def build_command(self, command):
        if self.use_sudo:
            return ['sudo'] + list(command)
        return list(command)

    def run_privileged(self, command, input_text=None):
        """
        Run a command and wait for it to finish.

        Args:
            command - An array containing the command and each of it's arguments
            input_text - (optional) A string to send to the command's stdin

        Return:
            A tuple of (exit_code, stdout, stderr). A missing executable gives
            the exit code 127.
        """
        try:
            process = subprocess.run(
                self.build_command(command),
                input=input_text,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True
            )
        except FileNotFoundError as e:
            return 127, '', str(e)
        return process.returncode, process.stdout, process.stderr
