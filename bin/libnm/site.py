#!/usr/bin/env python3

from enum import Enum
from libnm import input_util, template
from libnm.cert import CertResult

class SiteType(Enum):
    LARAVEL = 'laravel'
    STATIC = 'static'
    NODEJS = 'nodejs'
    WORDPRESS = 'wordpress'
    SPA = 'spa'
    PROXY = 'proxy'

    @property
    def label(self):
        return _labels[self]

    @property
    def uses_php(self):
        return self in (SiteType.LARAVEL, SiteType.WORDPRESS)

    @property
    def uses_port(self):
        return self in (SiteType.NODEJS, SiteType.PROXY)

    @property
    def uses_root(self):
        return self != SiteType.PROXY

_labels = {
    SiteType.LARAVEL: 'Laravel PHP Application',
    SiteType.STATIC: 'Static HTML/CSS/JS Website',
    SiteType.NODEJS: 'Node.js Application',
    SiteType.WORDPRESS: 'WordPress Site',
    SiteType.SPA: 'Single Page Application (SPA)',
    SiteType.PROXY: 'Reverse Proxy',
}

class SiteDefinition():
    """
    The values needed to render a vhost for one domain.
    """
    def __init__(self, domain, root_path=None, php_version=None, port=None,
            ssl_enabled=False, email=None, www_enabled=False, www_is_main=False):
        if not input_util.is_domain(domain):
            raise ValueError('Invalid domain name: ' + str(domain))
        if ssl_enabled and not email:
            raise ValueError('An email address is required when SSL is enabled')
        if port is not None and not input_util.is_port(port):
            raise ValueError('Invalid port: ' + str(port))
        self.domain = domain
        self.root_path = root_path
        self.php_version = php_version
        self.port = None if port is None else int(port)
        self.ssl_enabled = ssl_enabled
        self.email = email
        self.www_enabled = www_enabled
        self.www_is_main = www_enabled and www_is_main

    def summary(self, site_type):
        """
        Get [name, value] rows describing the site for a confirmation table.

        Args:
            site_type - The SiteType being created
        """
        rows = [['Site Type', site_type.value], ['Domain', self.domain]]
        if self.root_path:
            rows.append(['Root Path', self.root_path])
        if site_type.uses_php:
            rows.append(['PHP Version', self.php_version])
        if site_type.uses_port:
            rows.append(['Port', str(self.port)])
        rows.append(['SSL Enabled', 'yes' if self.ssl_enabled else 'no'])
        if self.email:
            rows.append(['Email', self.email])
        rows.append(['www Subdomain', 'yes' if self.www_enabled else 'no'])
        if self.www_enabled:
            if self.www_is_main:
                rows.append(['Main Domain', 'www.' + self.domain + ' (naked redirects to www)'])
            else:
                rows.append(['Main Domain', self.domain + ' (www redirects to naked)'])
        return rows

def create_site(env, site_type, site):
    """
    Render a vhost for a site, write and enable it, check the nginx
    configuration, request a certificate when asked to, and reload nginx.
    A failed syntax check leaves the files in place for manual correction and
    skips both the certificate and the reload.

    Args:
        env - The Environment holding the registry and external tools
        site_type - The SiteType selecting the template
        site - The SiteDefinition to render

    Return:
        True if the site was written, passed the syntax check and nginx was
        reloaded
    """
    log = env.log
    try:
        content = template.render_site(env.templates, site_type, site)
    except template.TemplateMissing as e:
        log.error(str(e))
        return False

    config_file = env.registry.write(site.domain, content)
    if not config_file:
        log.error('Unable to write the configuration for ' + site.domain)
        return False
    log.success('Site configuration created: ' + config_file)

    if not env.nginx.test_config():
        log.error('Configuration has errors. Please check and try again.')
        return False

    if site.ssl_enabled and site.email:
        result = env.certbot.issue(site.domain, site.email, site.www_enabled)
        if result == CertResult.ISSUED:
            log.success('SSL enabled for ' + site.domain)

    reloaded = env.nginx.reload()
    log.success('Site ' + site.domain + ' is now active!')
    return reloaded
