# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 21:12:08

import logging

from .properties import (
    Property, Properties,
    PropertiesError, NoSeparatorFound, InvalidProperty,
    PropertiesParser, PropertiesJsonParser, PropertiesYamlParser,
    new_from_string,
    get_separator, escape_separators, unescape_separators
)

__all__ = [
    'Property', 'Properties',
    'PropertiesError', 'NoSeparatorFound', 'InvalidProperty',
    'PropertiesParser', 'PropertiesJsonParser', 'PropertiesYamlParser',
    'new_from_string',
    'get_separator', 'escape_separators', 'unescape_separators'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
