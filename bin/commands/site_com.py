#!/usr/bin/env python3

from libnm import input_util, command_index

def _help():
    print('nginx-manager create [example.com [site_type]]  # Create a site configuration from a template')
    print('nginx-manager list  # List sites along with whether they are enabled')
    print('nginx-manager (remove|delete) [example.com]  # Delete a site configuration')
    print('nginx-manager enable [example.com]  # Enable a disabled site')
    print('nginx-manager disable [example.com]  # Disable a site without deleting it')
    print('nginx-manager templates  # List the available site templates')
index = command_index.CategoryIndex('site', _help)

def select_site(query_message, enabled=None):
    """
    Have the user select a site, or report that there are none.

    Args:
        query_message - The message to display in the prompt
        enabled - (optional) Limit the choices to enabled (True) or disabled
            (False) sites
    """
    from libnm import environment
    names = environment.get().registry.names(enabled)
    if len(names) == 0:
        print('No nginx sites found')
        return False
    return input_util.select_from(query_message, names)

def select_site_type():
    from libnm.site import SiteType
    options = [(site_type.label, site_type) for site_type in SiteType]
    return input_util.select_from('Select site type', options)

def parse_site_type(slug):
    """
    Get the SiteType for a template name, or False if there is none.

    Args:
        slug - A site type name such as "static" or "proxy"
    """
    from libnm.site import SiteType
    try:
        return SiteType(slug.strip().lower())
    except ValueError:
        return False

def collect_site(site_type=False, domain=False):
    """
    Ask the user for everything needed to create a site, show a summary and
    ask for confirmation.

    Args:
        site_type - (optional) A SiteType to skip the type prompt
        domain - (optional) A valid domain to skip the domain prompt

    Return:
        A (SiteType, SiteDefinition) tuple, or False if the user cancelled
    """
    from libnm import environment, settings
    from libnm.site import SiteDefinition
    from tabulate import tabulate
    log = environment.get().log
    log.heading('=== Create New Site Configuration ===')
    if site_type == False:
        site_type = select_site_type()
    if domain == False:
        domain = input_util.input_domain()

    root_path = None
    if site_type.uses_root:
        root_path = input_util.prompt_value('document root path',
                settings.get('default_web_root').rstrip('/') + '/' + domain)

    php_version = None
    if site_type.uses_php:
        php_version = input_util.prompt_value('PHP version', settings.get('default_php_version'))

    port = None
    if site_type.uses_port:
        port = input_util.input_port(settings.get_int('default_port'))

    email = None
    ssl_enabled = input_util.confirm("Enable SSL with Let's Encrypt?", False)
    if ssl_enabled:
        email = input_util.input_email()

    www_is_main = False
    www_enabled = input_util.confirm('Include www subdomain?', False)
    if www_enabled:
        www_is_main = input_util.select_from('Which domain should be the main one?', [
                ('Naked domain (' + domain + ') - redirect www to naked', False),
                ('www domain (www.' + domain + ') - redirect naked to www', True)
            ])

    site = SiteDefinition(domain, root_path, php_version, port,
            ssl_enabled, email, www_enabled, www_is_main)

    print()
    log.warn('=== Configuration Summary ===')
    print(tabulate(site.summary(site_type)))
    print()
    if not input_util.confirm('Continue?'):
        log.warn('Operation cancelled.')
        return False
    return site_type, site

def _create(domain, more):
    from libnm import environment
    from libnm.site import create_site
    site_type = False
    if domain != False:
        domain = domain.strip().lower()
        if not input_util.is_domain(domain):
            print('Invalid domain name: ' + domain)
            domain = False
    if more != False:
        site_type = parse_site_type(more[0])
        if site_type == False:
            print('Unknown site type: ' + more[0])
    collected = collect_site(site_type, domain)
    if collected == False:
        return False
    return create_site(environment.get(), collected[0], collected[1])
index.register_command('create', _create)
index.register_command('add', _create)

def _list():
    from libnm import environment
    from tabulate import tabulate
    log = environment.get().log
    log.heading('=== Nginx Sites ===')
    table_array = []
    for name, enabled in environment.get().registry.list():
        table_array.append([name, 'enabled' if enabled else 'disabled'])
    if len(table_array) > 0:
        print()
        print(tabulate(table_array, headers=['Site', 'Status']))
        print()
    else:
        print('No nginx sites found')
    return table_array
index.register_command('list', _list)

def _remove(domain):
    from libnm import environment
    env = environment.get()
    if domain == False:
        _list()
        domain = select_site('Select site to remove')
        if domain == False:
            return False
    if not input_util.is_domain(domain) or not env.registry.exists(domain):
        env.log.error('Site ' + domain + ' not found')
        return False
    if not input_util.confirm('Are you sure you want to remove ' + domain + '?', False):
        return False
    env.registry.remove(domain)
    env.log.success('Site ' + domain + ' removed')
    env.nginx.reload()
    return True
index.register_command('remove', _remove)
index.register_command('delete', _remove)

def _enable(domain):
    from libnm import environment
    env = environment.get()
    if domain == False:
        domain = select_site('Select site to enable', False)
        if domain == False:
            return False
    if not input_util.is_domain(domain) or not env.registry.enable(domain):
        env.log.error('Unable to find a disabled site named ' + domain)
        return False
    env.log.success(domain + ' enabled')
    if env.nginx.test_config():
        env.nginx.reload()
    return True
index.register_command('enable', _enable)

def _disable(domain):
    from libnm import environment
    env = environment.get()
    if domain == False:
        domain = select_site('Select site to disable', True)
        if domain == False:
            return False
    if not input_util.is_domain(domain) or not env.registry.disable(domain):
        env.log.error('Unable to find an enabled site named ' + domain)
        return False
    env.log.success(domain + ' disabled')
    env.nginx.reload()
    return True
index.register_command('disable', _disable)

def _templates():
    from libnm import environment
    from tabulate import tabulate
    store = environment.get().templates
    table_array = []
    for name in store.names():
        table_array.append([name, store.get_template_path(name)])
    if len(table_array) > 0:
        print()
        print(tabulate(table_array, headers=['Template', 'Path']))
        print()
    else:
        print('No templates found in ' + store.template_dir)
    return table_array
index.register_command('templates', _templates)
