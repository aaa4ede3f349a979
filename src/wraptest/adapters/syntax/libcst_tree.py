"""libcst implementation of the syntax interfaces.

libcst keeps every byte of the input (whitespace, comments, parentheses) in its
concrete syntax tree, so items that are not touched come back out exactly as
they went in, and a relocated function body keeps its comments and formatting.
"""

from __future__ import annotations

from collections.abc import Sequence

import libcst as cst

from wraptest.interfaces.syntax import (
    Attribute,
    Delegation,
    FunctionView,
    Item,
    ItemKind,
    SyntaxBackend,
    SyntaxParseError,
    SyntaxTree,
)

# ============================================================================
#                               Helpers
# ============================================================================


def dotted_name(node: cst.BaseExpression) -> str | None:
    """Return ``a.b.c`` for a name/attribute chain, or None for anything else."""
    if isinstance(node, cst.Name):
        return node.value
    if isinstance(node, cst.Attribute):
        base = dotted_name(node.value)
        return None if base is None else f"{base}.{node.attr.value}"
    return None


def decorator_attribute(module: cst.Module, decorator: cst.Decorator) -> Attribute:
    """Describe a decorator; a call is matched by the path of its callee."""
    expr = decorator.decorator
    target = expr.func if isinstance(expr, cst.Call) else expr
    return Attribute(path=dotted_name(target), source=module.code_for_node(expr))


def _is_docstring(statement: cst.BaseStatement) -> bool:
    return (
        isinstance(statement, cst.SimpleStatementLine)
        and len(statement.body) == 1
        and isinstance(statement.body[0], cst.Expr)
        and isinstance(
            statement.body[0].value, (cst.SimpleString, cst.ConcatenatedString)
        )
    )


def _parameter_names(params: cst.Parameters) -> list[str]:
    """Return every parameter name in signature order, ``*args``/``**kw`` included."""
    ordered = [
        *params.posonly_params,
        *params.params,
        params.star_arg,
        *params.kwonly_params,
        params.star_kwarg,
    ]
    # a bare `*` is a ParamStar and star_arg may be a sentinel
    return [p.name.value for p in ordered if isinstance(p, cst.Param)]


def _body_statements(
    body: cst.BaseSuite,
) -> list[cst.BaseStatement]:
    # a one-line body (`def f(): x; y`) becomes a single statement line
    if isinstance(body, cst.SimpleStatementSuite):
        return [cst.SimpleStatementLine(body=body.body)]
    return list(body.body)


# ============================================================================
#                               Items
# ============================================================================


class LibCstItem(Item):
    """A top-level statement of a libcst module."""

    def __init__(self, module: cst.Module, node: cst.BaseStatement) -> None:
        self._module = module
        self.node = node

    def kind(self) -> ItemKind:
        node = self.node
        if isinstance(node, cst.FunctionDef):
            return ItemKind.FUNCTION
        if isinstance(node, cst.ClassDef):
            return ItemKind.CLASS
        if isinstance(node, cst.SimpleStatementLine):
            if all(isinstance(s, (cst.Import, cst.ImportFrom)) for s in node.body):
                return ItemKind.IMPORT
            return ItemKind.STATEMENT
        return ItemKind.COMPOUND

    def attributes(self) -> tuple[Attribute, ...]:
        decorators = getattr(self.node, "decorators", ())
        return tuple(decorator_attribute(self._module, d) for d in decorators)

    def as_function(self) -> FunctionView | None:
        if isinstance(self.node, cst.FunctionDef):
            return LibCstFunction(self._module, self.node)
        return None

    def source(self) -> str:
        return self._module.code_for_node(self.node)

    def __repr__(self) -> str:
        return f"LibCstItem({self.kind().value})"


class LibCstFunction(FunctionView):
    """Function view over a `libcst.FunctionDef`."""

    def __init__(self, module: cst.Module, node: cst.FunctionDef) -> None:
        self._module = module
        self._node = node

    @property
    def name(self) -> str:
        return self._node.name.value

    @property
    def is_async(self) -> bool:
        return self._node.asynchronous is not None

    @property
    def type_params(self) -> str | None:
        type_parameters = getattr(self._node, "type_parameters", None)
        if type_parameters is None:
            return None
        return self._module.code_for_node(type_parameters)

    @property
    def return_type(self) -> str | None:
        if self._node.returns is None:
            return None
        return self._module.code_for_node(self._node.returns.annotation)

    @property
    def body(self) -> str:
        return self._module.code_for_node(self._node.body)

    def attributes(self) -> tuple[Attribute, ...]:
        return tuple(
            decorator_attribute(self._module, d) for d in self._node.decorators
        )

    def delegate(self, delegation: Delegation) -> Item:
        """Move the body into a nested thunk and return the wrapper's result.

        A leading docstring stays on the outer function so that ``__doc__`` is
        unchanged. Decorators, signature, comments above the function and the
        comment after its colon are kept as they are.

        The thunk opens with ``nonlocal`` for every parameter, so a body that
        reassigns a fixture (``tmp_path = tmp_path / "x"``) still reads the
        argument first.
        """
        statements = _body_statements(self._node.body)
        docstring: list[cst.BaseStatement] = []
        if statements and _is_docstring(statements[0]):
            docstring, statements = statements[:1], statements[1:]
        if not statements:
            statements = [cst.SimpleStatementLine(body=[cst.Pass()])]
        if names := _parameter_names(self._node.params):
            # assignments to a parameter must rebind the outer name
            rebind = cst.Nonlocal(names=[cst.NameItem(cst.Name(n)) for n in names])
            statements = [cst.SimpleStatementLine(body=[rebind]), *statements]

        thunk = cst.FunctionDef(
            name=cst.Name(delegation.thunk_name),
            params=cst.Parameters(),
            body=cst.IndentedBlock(body=statements),
            asynchronous=cst.Asynchronous() if delegation.awaited else None,
        )
        call: cst.BaseExpression = cst.Call(
            func=cst.parse_expression(delegation.wrapper),
            args=[cst.Arg(value=cst.Name(delegation.thunk_name))],
        )
        if delegation.awaited:
            call = cst.Await(expression=call)
        new_statements = [
            *docstring,
            thunk,
            cst.SimpleStatementLine(body=[cst.Return(value=call)]),
        ]

        body = self._node.body
        if isinstance(body, cst.IndentedBlock):
            new_body = body.with_changes(body=new_statements)
        else:
            new_body = cst.IndentedBlock(
                body=new_statements, header=body.trailing_whitespace
            )
        return LibCstItem(self._module, self._node.with_changes(body=new_body))


# ============================================================================
#                               Tree & backend
# ============================================================================


class LibCstTree(SyntaxTree):
    """A parsed `libcst.Module`."""

    def __init__(self, module: cst.Module) -> None:
        self._module = module
        self._items = tuple(LibCstItem(module, node) for node in module.body)

    @property
    def items(self) -> Sequence[Item]:
        return self._items

    def reassemble(self, items: Sequence[Item]) -> str:
        nodes = []
        for item in items:
            if not isinstance(item, LibCstItem):
                raise TypeError(f"Cannot reassemble {type(item).__name__} with libcst")
            nodes.append(item.node)
        return self._module.with_changes(body=nodes).code

    def module_comments(self) -> tuple[str, ...]:
        lines = list(self._module.header)
        for node in self._module.body:
            lines.extend(node.leading_lines)
        lines.extend(self._module.footer)
        return tuple(
            line.comment.value
            for line in lines
            if line.comment is not None and not line.whitespace.value
        )


class LibCstBackend(SyntaxBackend):
    """Parse Python modules with libcst."""

    def parse(self, source: str) -> SyntaxTree:
        try:
            module = cst.parse_module(source)
        except cst.ParserSyntaxError as e:
            raise SyntaxParseError(
                f"{e.message} (line {e.raw_line}, column {e.raw_column})"
            ) from e
        return LibCstTree(module)
