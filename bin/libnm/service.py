#!/usr/bin/env python3

def reload(service_name, runner):
    """
    Reload a system service. systemctl is tried first and the SysV service
    command is used if systemctl fails or is not available.

    Args:
        service_name - The name of the service to reload
        runner - A privileged command runner

    Return:
        True if either command succeeded
    """
    code, out, err = runner.run_privileged(['systemctl', 'reload', service_name])
    if code == 0:
        return True
    code, out, err = runner.run_privileged(['service', service_name, 'reload'])
    return code == 0