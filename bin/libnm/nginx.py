#!/usr/bin/env python3

from libnm import service, system

class Nginx():
    """
    The installed nginx server: configuration checks and reloads.
    """
    def __init__(self, runner, log, binary='nginx', service_name='nginx'):
        self.runner = runner
        self.log = log
        self.binary = binary
        self.service_name = service_name

    def is_installed(self):
        return system.is_installed(self.binary)

    def test_config(self):
        """
        Run nginx's own syntax check, showing its output.

        Return:
            True if the configuration is valid
        """
        self.log.info('Testing nginx configuration...')
        code, out, err = self.runner.run_privileged([self.binary, '-t'])
        self.log.output(out)
        self.log.output(err)
        if code == 0:
            self.log.success('nginx configuration is valid')
            return True
        self.log.error('nginx configuration has errors')
        return False

    def reload(self):
        """
        Have nginx reload it's configuration from disk. A failure is reported
        but nothing is rolled back.
        """
        self.log.info('Reloading nginx...')
        if service.reload(self.service_name, self.runner):
            self.log.success('nginx reloaded successfully')
            return True
        self.log.error('Failed to reload nginx')
        return False
