#!/usr/bin/env python3

from libnm import input_util, command_index

def _help():
    print('nginx-manager ssl [example.com [email]]  # Request a Let\'s Encrypt certificate for an existing site')
index = command_index.CategoryIndex('ssl', _help)

def _ssl(domain, more):
    from libnm import environment
    from libnm.cert import CertResult
    from commands.site_com import select_site
    env = environment.get()
    if domain == False:
        domain = select_site('Select site for the certificate', True)
        if domain == False:
            return False
    if not input_util.is_domain(domain) or not env.registry.exists(domain):
        env.log.error('Site ' + domain + ' not found')
        return False
    if env.certbot.has_cert(domain):
        env.log.warn('A certificate for ' + domain + ' already exists and will be replaced or expanded.')
    email = False
    if more != False:
        email = more[0]
    if not email:
        email = input_util.input_email()
    include_www = input_util.confirm('Include www.' + domain + '?', False)
    result = env.certbot.issue(domain, email, include_www)
    if result != CertResult.ISSUED:
        return False
    env.log.success('SSL enabled for ' + domain)
    env.nginx.reload()
    return True
index.register_command('ssl', _ssl)
index.register_command('addssl', _ssl)
