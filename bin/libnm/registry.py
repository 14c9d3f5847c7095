#!/usr/bin/env python3

import os

class SiteRegistry():
    """
    The vhost files in nginx's sites-available directory and the symlinks to
    them in sites-enabled. A site is enabled when a symlink of the same name
    exists in the enabled directory. Writes and deletes go through a
    privileged runner.
    """
    def __init__(self, available_dir, enabled_dir, runner):
        self.available_dir = available_dir
        self.enabled_dir = enabled_dir
        self.runner = runner

    def _check_name(self, domain):
        if len(domain) == 0 or '/' in domain or domain.startswith('.'):
            raise ValueError('Invalid site name: ' + domain)

    def available_path(self, domain):
        """
        Get the full path of the vhost file for a given domain.

        Args:
            domain - The domain associated with the vhost file
        """
        self._check_name(domain)
        return os.path.join(self.available_dir, domain)

    def enabled_path(self, domain):
        """
        Get the full path of the enabled symlink for a given domain.

        Args:
            domain - The domain associated with the vhost file
        """
        self._check_name(domain)
        return os.path.join(self.enabled_dir, domain)

    def exists(self, domain):
        return os.path.isfile(self.available_path(domain))

    def is_enabled(self, domain):
        return os.path.islink(self.enabled_path(domain))

    def write(self, domain, content):
        """
        Write the vhost file for a domain, replacing any existing one, then
        enable it.

        Args:
            domain - The domain associated with the vhost file
            content - The rendered configuration

        Return:
            The path of the written file, or False if it could not be written
        """
        path = self.available_path(domain)
        code, out, err = self.runner.run_privileged(['tee', path], input_text=content)
        if code != 0:
            return False
        if not self._link(domain):
            return False
        return path

    def _link(self, domain):
        code, out, err = self.runner.run_privileged(
                ['ln', '-sfn', self.available_path(domain), self.enabled_path(domain)])
        return code == 0

    def list(self):
        """
        Yield (name, enabled) for every vhost file in sites-available, sorted
        by name.
        """
        if not os.path.isdir(self.available_dir):
            return
        for name in sorted(os.listdir(self.available_dir)):
            if name.startswith('.'):
                continue
            if os.path.isfile(os.path.join(self.available_dir, name)):
                yield name, self.is_enabled(name)

    def names(self, enabled=None):
        """
        Get the names of vhost files, optionally only enabled or disabled ones.

        Args:
            enabled - (optional) True for enabled sites, False for disabled
                sites, None for all of them
        """
        return [name for name, state in self.list() if enabled is None or state == enabled]

    def enable(self, domain):
        """
        Create the enabled symlink for an existing vhost file.

        Args:
            domain - The domain to enable

        Return:
            True if the site was disabled and is now enabled
        """
        if not self.exists(domain) or self.is_enabled(domain):
            return False
        return self._link(domain)

    def disable(self, domain):
        """
        Remove the enabled symlink for a domain, keeping the vhost file.

        Args:
            domain - The domain to disable

        Return:
            True if a symlink was removed
        """
        if not self.is_enabled(domain):
            return False
        code, out, err = self.runner.run_privileged(['rm', '-f', self.enabled_path(domain)])
        return code == 0

    def remove(self, domain):
        """
        Delete the enabled symlink and the vhost file of a domain. Each is
        removed if present, independently of the other.

        Args:
            domain - Delete the files associated with this domain

        Return:
            False if there was no vhost file for the domain
        """
        existed = self.exists(domain)
        if os.path.lexists(self.enabled_path(domain)):
            self.runner.run_privileged(['rm', '-f', self.enabled_path(domain)])
        if existed:
            self.runner.run_privileged(['rm', '-f', self.available_path(domain)])
        return existed
