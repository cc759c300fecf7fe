"""Rich table builders used by the CLI.

Kept separate to keep the command module smaller.
"""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from rbs_inline.adapters.ruby.scanner import ScannedDeclaration
from rbs_inline.core.members import MethodKind, Visibility
from rbs_inline.declarations import (
    AliasDecl,
    AttrDecl,
    MethodDecl,
    MixinDecl,
    PrivateMarker,
    PublicMarker,
)


def describe_declaration(scanned: ScannedDeclaration) -> tuple[str, str, str]:
    """Return (kind, name, signature) for one scanned declaration."""
    decl = scanned.declaration
    if isinstance(decl, MethodDecl):
        prefix = "self." if decl.method_kind == MethodKind.SINGLETON else ""
        signature = " | ".join(str(o.method_type) for o in decl.method_overloads())
        return "def", f"{prefix}{decl.method_name}", escape(signature)
    if isinstance(decl, AliasDecl):
        result = decl.rbs()
        if result.error is not None:
            return "alias", "", f"[red]error:[/red] {escape(str(result.error))}"
        alias = result.unwrap()
        return "alias", alias.new_name, f"alias {alias.new_name} {alias.old_name}"
    if isinstance(decl, MixinDecl):
        member = decl.rbs()
        kind = decl.kind.value if decl.kind else decl.node.name
        if member is None:
            return kind, "", "[dim](unsupported arguments)[/dim]"
        return kind, str(member.name), escape(str(member))
    if isinstance(decl, AttrDecl):
        result = decl.rbs()
        if result.error is not None:
            return decl.node.name, "", f"[red]error:[/red] {escape(str(result.error))}"
        members = result.unwrap()
        names = ", ".join(m.name for m in members)
        return decl.node.name, names, escape("; ".join(str(m) for m in members))
    if isinstance(decl, (PrivateMarker, PublicMarker)):
        return decl.visibility.value, "", ""
    return type(decl).__name__, "", ""


def build_declarations_table(items: list[ScannedDeclaration], show_private: bool) -> Table:
    """Build the (Line, Owner, Kind, Name, Visibility, Signature) table for `scan`."""
    table = Table(show_header=True)
    table.add_column("Line", justify="right")
    table.add_column("Owner", style="cyan")
    table.add_column("Kind")
    table.add_column("Name")
    table.add_column("Visibility")
    table.add_column("Signature")
    for item in items:
        if not show_private and item.visibility == Visibility.PRIVATE:
            continue
        kind, name, signature = describe_declaration(item)
        table.add_row(
            str(item.declaration.line),
            item.owner or "",
            kind,
            escape(name),
            item.visibility.value,
            signature,
        )
    return table
