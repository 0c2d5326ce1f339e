"""Helper functionality that is used in other modules of this package."""

from __future__ import annotations

from collections.abc import Sequence

ARGUMENT_SEPARATOR = "\n   "
ELEMENT_SUFFIX = "Element"
RETURN_TYPE_SUFFIX = "ReturnType"
STRUCT_PREFIX = "Spec"


def capitalize_first_letter(name: str) -> str:
    """Uppercase the first character of a name and leave the rest untouched.

    E.g. 'getValue' becomes 'GetValue', 'x' becomes 'X'. Unlike `str.capitalize`, later
    characters keep their case, so camel-cased names stay readable.

    Args:
        name (str): The original name.

    Returns:
        str: The capitalized name.
    """
    return name[:1].upper() + name[1:]


def struct_name(*parts: str) -> str:
    """Build a synthesized struct name by capitalizing and concatenating name parts.

    For example, method 'save' and parameter 'options' give 'SaveOptions'.

    Args:
        *parts (str): The names to combine, outermost first.

    Returns:
        str: The struct name.
    """
    return "".join(capitalize_first_letter(part) for part in parts)


def element_struct_name(array_owner_name: str) -> str:
    """Name of the struct declared for the elements of an array of records.

    Args:
        array_owner_name (str): The synthesized name of the array itself, e.g. 'SaveOptionsItems'.

    Returns:
        str: The element struct name, e.g. 'SaveOptionsItemsElement'.
    """
    return f"{array_owner_name}{ELEMENT_SUFFIX}"


def return_struct_name(method_name: str) -> str:
    """Name of the struct declared for a record-shaped return value, e.g. 'GetUserReturnType'."""
    return f"{capitalize_first_letter(method_name)}{RETURN_TYPE_SUFFIX}"


def native_module_name(module_name: str) -> str:
    return f"Native{module_name}"


def struct_reference(module_name: str, name: str) -> str:
    """The fully qualified C++ name of a synthesized struct.

    Args:
        module_name (str): The module the struct was collected for.
        name (str): The synthesized struct name.

    Returns:
        str: For example 'JS::NativeSampleModule::SpecSaveOptions'.
    """
    return f"JS::{native_module_name(module_name)}::{STRUCT_PREFIX}{name}"


def new_argument(label: str, objc_type: str, name: str) -> str:
    """Create an Objective-C selector argument.

    An empty label gives the unlabeled form that is used for the first argument.

    Args:
        label (str): The selector label.
        objc_type (str): The argument type.
        name (str): The argument variable name.

    Returns:
        str: For example 'count:(double)count'.
    """
    return f"{label}:({objc_type}){name}"


def join_arguments(arguments: Sequence[str] | None) -> str:
    """Joins selector arguments, one argument per line.

    Args:
        arguments (Sequence[str] | None): The arguments to join.

    Returns:
        str: The joined arguments.
    """
    if arguments:
        return ARGUMENT_SEPARATOR.join(arguments)

    else:
        return ""


def new_method_declaration(name: str, return_type: str, arguments: str = "") -> str:
    """Create an Objective-C instance method declaration.

    Args:
        name (str): The method name (first selector part).
        return_type (str): The declared return type.
        arguments (str, optional): The already joined arguments. Defaults to "".

    Returns:
        str: For example '- (void) show:(NSString *)message;'.
    """
    return f"- ({return_type}) {name}{arguments};"


def wrap_optional(cpp_type: str, nullable: bool) -> str:
    """Wrap a C++ value type in `folly::Optional` when needed."""
    return f"folly::Optional<{cpp_type}>" if nullable else cpp_type
