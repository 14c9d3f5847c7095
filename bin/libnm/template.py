#!/usr/bin/env python3

import glob
import os
import re

PLACEHOLDERS = (
    'LOG_DOMAIN',
    'ROOT_PATH',
    'PHP_VERSION',
    'PORT',
    'UPSTREAM_NAME',
    'DOMAIN',
    'REDIRECT_BLOCK',
)

_token = re.compile(r'\{\{([A-Z_]+)\}\}')

class TemplateMissing(Exception):
    """Raised when no template file exists for a site type."""
    def __init__(self, name, path):
        self.name = name
        self.path = path
        super().__init__('Template file not found: ' + path)

def upstream_name(domain):
    """
    Get a name usable as an nginx upstream identifier for a domain. Dots are
    not allowed there, so they are replaced with underscores.

    Args:
        domain - The domain name
    """
    return domain.replace('.', '_')

def redirect_block(domain, www_is_main):
    """
    Get a server block that permanently redirects one host of a domain to the
    other, keeping the scheme, path and query string.

    Args:
        domain - The domain name without www
        www_is_main - True to send the naked domain to www, False to send www
            to the naked domain
    """
    if www_is_main:
        return '# Redirect naked domain to www\n' + \
            'server {\n' + \
            '    listen 80;\n' + \
            '    server_name ' + domain + ';\n' + \
            '    return 301 $scheme://www.' + domain + '$request_uri;\n' + \
            '}'
    return '# Redirect www to naked domain\n' + \
        'server {\n' + \
        '    listen 80;\n' + \
        '    server_name www.' + domain + ';\n' + \
        '    return 301 $scheme://' + domain + '$request_uri;\n' + \
        '}'

def render(template_text, values):
    """
    Replace every {{NAME}} token with its value from a mapping. The template is
    scanned once, so text inside a value is never treated as a token. Tokens
    whose name is not in the mapping are left as they are.

    Args:
        template_text - The raw template
        values - A mapping of placeholder name to replacement string
    """
    def _replace(match):
        name = match.group(1)
        if name in values:
            return values[name]
        return match.group(0)
    return _token.sub(_replace, template_text)

def site_values(site):
    """
    Build the placeholder mapping for a site definition.

    Args:
        site - A SiteDefinition
    """
    values = {
        'LOG_DOMAIN': site.domain,
        'ROOT_PATH': site.root_path or '',
        'PHP_VERSION': site.php_version or '',
        'PORT': '' if site.port is None else str(site.port),
        'UPSTREAM_NAME': upstream_name(site.domain),
        'DOMAIN': site.domain,
        'REDIRECT_BLOCK': '',
    }
    if site.www_enabled:
        if site.www_is_main:
            values['DOMAIN'] = 'www.' + site.domain
        values['REDIRECT_BLOCK'] = redirect_block(site.domain, site.www_is_main)
    return values

class TemplateStore():
    """
    A directory of nginx vhost templates named <site type>.conf. A file of the
    same name in the custom/ sub-directory takes precedence over a shipped one.
    """
    suffix = '.conf'

    def __init__(self, template_dir):
        self.template_dir = os.path.join(template_dir, '')
        self.custom_dir = self.template_dir + 'custom/'

    def get_template_path(self, name):
        """
        Get the full path for a given nginx vhost template name.

        Args:
            name - The name (slug) of the template
        """
        filename = name + self.suffix
        if os.path.exists(self.custom_dir + filename):
            return self.custom_dir + filename
        return self.template_dir + filename

    def names(self):
        """
        Get a sorted list of every template name, shipped and custom.
        """
        templates = []
        for folder in [self.template_dir, self.custom_dir]:
            for temp in glob.glob(folder + '*' + self.suffix):
                name = os.path.basename(temp)[:-len(self.suffix)]
                if name not in templates:
                    templates.append(name)
        return sorted(templates)

    def load(self, name):
        """
        Read the raw text of a template.

        Args:
            name - The name (slug) of the template
        """
        path = self.get_template_path(name)
        if not os.path.isfile(path):
            raise TemplateMissing(name, path)
        with open(path) as template:
            return template.read()

def render_site(store, site_type, site):
    """
    Produce the vhost configuration text for a site.

    Args:
        store - The TemplateStore to read from
        site_type - The SiteType selecting the template
        site - The SiteDefinition supplying the values
    """
    content = render(store.load(site_type.value), site_values(site))
    return content.rstrip('\n') + '\n'
