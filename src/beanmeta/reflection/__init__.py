"""Property metadata resolution, caching and path navigation."""

from .invoker import DefaultConstructor, FieldReader, FieldWriter, Invoker, MethodInvoker, PropertyInvoker
from .markers import bridge, is_bridge
from .metadata_registry import MetadataRegistry, get_default_registry
from .navigation import PropertyNavigator
from .property_model import PropertyModel
from .property_tokenizer import PropertyPath, PropertyTokenizer, parse
from .reflector import Reflector, resolve

__all__ = [
    "DefaultConstructor",
    "FieldReader",
    "FieldWriter",
    "Invoker",
    "MetadataRegistry",
    "MethodInvoker",
    "PropertyInvoker",
    "PropertyModel",
    "PropertyNavigator",
    "PropertyPath",
    "PropertyTokenizer",
    "Reflector",
    "bridge",
    "get_default_registry",
    "is_bridge",
    "parse",
    "resolve",
]
