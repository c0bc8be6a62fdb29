# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 22:58:41

from .exceptions import PropertiesError, NoSeparatorFound, InvalidProperty
from .model import Property, Properties
from .parser import (
    PropLineReader,
    PropertiesParser,
    PropertiesJsonParser,
    PropertiesYamlParser,
    new_from_string
)
from .utils import get_separator, escape_separators, unescape_separators
