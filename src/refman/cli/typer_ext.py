# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer helpers producing sorted, predictable help output."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final, TypeVar

import typer
from click.core import Context, Parameter
from click.formatting import HelpFormatter
from typer.core import TyperCommand, TyperGroup

ARGUMENT_PARAM_TYPE: Final[str] = "argument"

CommandCallback = TypeVar("CommandCallback", bound=Callable[..., Any])


@dataclass(frozen=True, slots=True)
class TyperAppConfig:
    """Options used to build a Typer application."""

    help_text: str
    name: str | None = None
    no_args_is_help: bool = True


def _primary_option_name(param: Parameter) -> str:
    """Return the long option name (without dashes) used as the sort key."""

    option_names = tuple(getattr(param, "opts", ())) + tuple(getattr(param, "secondary_opts", ()))
    long_names = [name for name in option_names if name.startswith("--")]
    candidate = long_names[0] if long_names else (next(iter(option_names), "") or param.name or "")
    return candidate.lstrip("-").lower()


class SortedTyperCommand(TyperCommand):
    """Typer command listing arguments first, then options alphabetically."""

    def format_options(self, ctx: Context, formatter: HelpFormatter) -> None:
        argument_records: list[tuple[str, str]] = []
        option_entries: list[tuple[tuple[str, int], tuple[str, str]]] = []
        for index, param in enumerate(self.get_params(ctx)):
            record = param.get_help_record(ctx)
            if record is None:
                continue
            if getattr(param, "param_type_name", "") == ARGUMENT_PARAM_TYPE:
                argument_records.append(record)
            else:
                option_entries.append(((_primary_option_name(param), index), record))
        if argument_records:
            with formatter.section("Arguments"):
                formatter.write_dl(argument_records)
        if option_entries:
            with formatter.section("Options"):
                formatter.write_dl([record for _, record in sorted(option_entries, key=lambda item: item[0])])


class SortedTyperGroup(TyperGroup):
    """Typer group that defaults to :class:`SortedTyperCommand`."""

    command_class = SortedTyperCommand


class SortedTyper(typer.Typer):
    """Typer application registering commands with sorted help output."""

    def command(
        self,
        name: str | None = None,
        *,
        cls: type[TyperCommand] | None = None,
        **kwargs: Any,
    ) -> Callable[[CommandCallback], CommandCallback]:
        return super().command(name, cls=cls or SortedTyperCommand, **kwargs)


def create_typer(*, config: TyperAppConfig) -> SortedTyper:
    """Return a :class:`SortedTyper` built from ``config``.

    Args:
        config: Application name, help text, and invocation options.

    Returns:
        SortedTyper: Configured Typer application.
    """

    return SortedTyper(
        name=config.name,
        help=config.help_text,
        cls=SortedTyperGroup,
        no_args_is_help=config.no_args_is_help,
        add_completion=False,
    )


__all__ = ["SortedTyper", "TyperAppConfig", "create_typer"]
