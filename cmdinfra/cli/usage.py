"""
Usage text generation for a command schema.

Output layout::

    Usage:
      prog command [options] <required> [optional]
    options:
      -v, --verbose: Print more [false]

    arguments:
      required - Help for it
"""

from .schema import ArgumentSpec, CommandSchema, OptionSpec


def _render_argument_ref(argument: ArgumentSpec) -> str:
    """Render an argument for the usage line."""
    if argument.is_required:
        return f"<{argument.name}>"
    return f"[{argument.name}]"


def _render_option_line(option: OptionSpec) -> str:
    default = option.render_default()
    return f"  -{option.short}, --{option.name}: {option.help} [{default}]\n"


def _render_argument_line(argument: ArgumentSpec) -> str:
    return f"  {argument.name} - {argument.help}\n"


def render_usage(schema: CommandSchema, prog: str, command: str) -> str:
    """
    Render usage text for a command.

    Pure function of the declarations; never parses tokens.

    Args:
        schema: Declared options and arguments
        prog: Program name shown in the usage line
        command: Command name shown in the usage line

    Returns:
        str: Multi-line usage text
    """
    text = f"Usage:\n  {prog} {command} "
    if schema.has_options:
        text += "[options] "
    text += " ".join(_render_argument_ref(a) for a in schema.arguments)

    if schema.has_options:
        text += "\noptions:\n" + "".join(_render_option_line(o) for o in schema.options)

    if schema.has_arguments:
        text += "\narguments:\n" + "".join(
            _render_argument_line(a) for a in schema.arguments
        )

    return text
