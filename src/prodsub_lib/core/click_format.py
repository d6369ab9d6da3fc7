# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import click
from click import HelpFormatter
from click_help_colors import HelpColorsCommand

from .config import CFG


class GNUHelpFormatter(HelpFormatter):
    """Help formatter printing options in GNU-style with colored headings."""

    def __init__(self, width=None, headers_color=None, options_color=None):
        super().__init__(width=width)
        self.headers_color = headers_color or "white"
        self.options_color = options_color or "white"

    def write_heading(self, heading):
        styled_heading = click.style(heading, fg=self.headers_color, bold=True)
        self.write(f"{styled_heading}\n")

    def write_usage(self, prog_name, args="", prefix=None):
        if prefix is None:
            prefix = "Usage:"

        styled_prefix = click.style(prefix, fg=self.headers_color, bold=True)
        usage_line = f"{styled_prefix} {prog_name}"

        if args:
            usage_line += f" {args}"

        self.write(f"{usage_line}\n")

    def write_dl(self, rows, col_max=30, col_spacing=2):
        for term, definition in rows:
            colored_term = click.style(term, fg=self.options_color, bold=True)
            self.write(f"  {colored_term}\n")

            if definition:
                for line in definition.splitlines():
                    if line.strip():
                        self.write(f"      {line}\n")
            self.write("\n")


class GNUHelpColorsCommand(HelpColorsCommand):
    """
    Command printing GNU-style colored help.

    Usage errors (missing arguments, unknown options, invalid values)
    exit with the default prodsub error code instead of click's 2.
    """

    def get_help(self, ctx):
        formatter = GNUHelpFormatter(
            width=ctx.terminal_width,
            headers_color=getattr(self, "help_headers_color", "white"),
            options_color=getattr(self, "help_options_color", "white"),
        )

        self.format_help(ctx, formatter)
        return formatter.getvalue()

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = CFG.exit_codes.default
            raise
