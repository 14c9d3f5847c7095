#!/usr/bin/env python3

import inquirer
import re

_label = re.compile(r'[A-Za-z0-9]([A-Za-z0-9\-]{0,61}[A-Za-z0-9])?')

def is_domain(text):
    """
    Determine if a text string is a valid domain name. Each dot separated label
    must be 1 to 63 letters, digits or hyphens and may not start or end with a
    hyphen. No DNS lookup is made.

    Args:
        text - the string to test
    """
    if not isinstance(text, str) or len(text) == 0:
        return False
    for label in text.split('.'):
        if _label.fullmatch(label) == None:
            return False
    return True

def input_domain():
    """
    Prompt the user to input a domain name.
    """
    domain = False
    while not domain:
        domain = input('Enter domain name (e.g., example.com): ')
        domain = domain.strip().lower()
        if not is_domain(domain):
            domain = False
            print('Invalid domain name. Please try again.')
    return domain

def is_port(text):
    """
    Determine if a text string is a usable TCP port number.

    Args:
        text - the string to test
    """
    text = str(text).strip()
    if not text.isdigit():
        return False
    return 0 < int(text) < 65536

def input_port(default):
    """
    Prompt the user for an application port until a valid one is given.

    Args:
        default - The port to use if nothing is entered
    """
    while True:
        port = prompt_value('application port', str(default))
        if is_port(port):
            return int(port)
        print('Invalid port. Enter a number from 1 to 65535.')

def input_email():
    """
    Prompt the user for a non-empty email address.
    """
    email = ''
    while len(email) == 0:
        email = prompt_value("email for Let's Encrypt", '').strip()
        if len(email) == 0:
            print('An email address is required for SSL certificates.')
    return email

def _ask(questions):
    answers = inquirer.prompt(questions)
    if answers is None:
        raise KeyboardInterrupt
    return answers

def confirm(text, default=True):
    """
    Simply ask the user a yes or no question.

    Args:
        text - The text to use in the prompt
        default - (optional) The value to use if nothing is given
    """
    questions = [
        inquirer.Confirm('confirm', message=text, default=default),
    ]
    return _ask(questions)['confirm']

def prompt_value(key, value):
    """
    Ask for a text value, offering a default.

    Args:
        key - A short description of the value
        value - The default value
    """
    questions = [
        inquirer.Text('query', message='Enter ' + key, default=value),
    ]
    return _ask(questions)['query']

def select_from(query_message, options):
    """
    Have the user select from an Array of Strings or (label, value) tuples.

    Args:
        query_message - A query message to display to the user when selecting
        options - The options to select from
    """
    questions = [
        inquirer.List('s',
                    message=query_message,
                    choices=options
                )
    ]
    return _ask(questions)['s']
