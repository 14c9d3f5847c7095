#!/usr/bin/env python3

import os
from enum import Enum
from libnm import system

le_directory = '/etc/letsencrypt/'

class CertResult(Enum):
    ISSUED = 'issued'
    FAILED = 'failed'
    NOT_FOUND = 'not found'

def get_domain_list(domain, include_www):
    """
    Get the domains a new certificate should cover.

    Args:
        domain - The primary domain without www
        include_www - True to also cover www.domain
    """
    if include_www:
        return [domain, 'www.' + domain]
    return [domain]

class Certbot():
    """
    Issue Let's Encrypt certificates with certbot's nginx plugin.
    """
    def __init__(self, runner, log, binary='certbot'):
        self.runner = runner
        self.log = log
        self.binary = binary

    def is_installed(self):
        return system.is_installed(self.binary)

    def has_cert(self, domain):
        """
        Tests to see if a given domain is a primary domain on a certificate.

        Args:
            domain - The primary domain presumed to be on the certificate
        """
        return os.path.exists(le_directory + 'live/' + domain + '/cert.pem')

    def issue(self, domain, email, include_www):
        """
        Request a certificate for a domain without any prompts.

        Args:
            domain - The primary domain to use for the new certificate
            email - The contact address registered with Let's Encrypt
            include_www - True to also cover www.domain

        Return:
            A CertResult. NOT_FOUND means certbot is not installed.
        """
        if not self.is_installed():
            self.log.warn('Certbot not found. Install certbot to auto-generate SSL certificates.')
            return CertResult.NOT_FOUND
        self.log.info('Generating SSL certificate for ' + domain + '...')
        command = [self.binary, '--nginx']
        for dom in get_domain_list(domain, include_www):
            command += ['-d', dom]
        command += ['--email', email, '--agree-tos', '--non-interactive']
        code, out, err = self.runner.run_privileged(command)
        self.log.output(out)
        if code != 0:
            self.log.output(err)
            self.log.error('Unable to issue a certificate for ' + domain)
            return CertResult.FAILED
        return CertResult.ISSUED
