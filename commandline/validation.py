"""
Pre-flight check of a whole option table.

validate_definitions(options) runs before any parsing (and before rendering
help). It catches declaration bugs, not user input problems:
- a long or short name used by more than one definition (or twice by one),
- a definition without any non-empty long name,
- a name containing '=' (it could never be matched: tokens split on the first '='),
- an inverse-boolean action on an option that does not take exactly one parameter.

All violations are reported, not only the first one. They are printed to the
fault console and raised together as a DefinitionExit; the program must not
go on to parse arguments with a broken table.
"""
from collections import Counter

from .actions import StoreInverseBool
from .faults import *


def _check_unique_names(options):
    counts = Counter()
    for option in options:
        counts.update(option.long_names)
        counts.update(option.short_names)

    for name, count in sorted(counts.items()):
        if count > 1:
            yield DuplicateNameError(
                "option name %r is used %d times" % (name, count),
                title="duplicate option name",
                code=FaultCode.DUPLICATE_NAME,
                hint="every long and short name must belong to exactly one option",
                option=name,
            )


def _check_names(options):
    for position, option in enumerate(options, start=1):
        if not any(option.long_names):
            yield MissingLongNameError(
                "option %d must have at least one long name" % position,
                title="missing long name",
                code=FaultCode.MISSING_LONG_NAME,
                hint="give the option a primary name such as '--name'",
                index=position,
            )
        for name in option.names:
            if "=" in name:
                yield ForbiddenCharacterError(
                    "option %r contains forbidden character '='" % name,
                    title="forbidden character in option name",
                    code=FaultCode.FORBIDDEN_CHARACTER,
                    hint="'=' separates an option from its value and cannot be part of a name",
                    option=name,
                    index=position,
                )


def _check_actions(options):
    for position, option in enumerate(options, start=1):
        inverse = isinstance(option.if_found, StoreInverseBool) or isinstance(option.if_not_found, StoreInverseBool)
        if inverse and len(option.parameters) != 1:
            yield InverseActionError(
                "option %d (%r) inverts a boolean but takes %d parameters" % (
                    position, option.primary_name, len(option.parameters)
                ),
                title="inverse action on a multi-valued option",
                code=FaultCode.INVERSE_ACTION,
                hint="complement options must take exactly one boolean parameter",
                option=option.primary_name,
                index=position,
            )


def validate_definitions(options, /):
    """
    Check an option table; raise DefinitionExit listing every violation.

    returns
    - None when the table is well formed.

    raises
    - DefinitionExit (an ExceptionGroup of DeclarationError) otherwise. The
      violations are printed to the fault console first.
    """
    options = tuple(options)
    faults = [
        *_check_unique_names(options),
        *_check_names(options),
        *_check_actions(options),
    ]
    if faults:
        trigger(DefinitionExit(faults), shell=True)


__all__ = (
    "validate_definitions",
)
