# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Storage-independent predicate expression trees.

A :class:`Predicate` binds one :class:`Parameter` (the entity variable) over
a body of frozen expression nodes. Nothing here knows about SQL or any other
query language: store adapters walk the tree and translate it, and
:func:`evaluate` interprets it directly against Python objects.

Example::

    e = Parameter("e")
    active = Predicate(e, Compare("eq", Member(e, "employee_status"), Constant(EmployeeStatus.ACTIVE)))
    alice = Predicate.icontains("first_name", "ali")

    both = active.and_also(alice)   # alice's variable is rewritten to ``e``
    both.matches(employee)

Parameters compare by identity, like bound variables in a lambda: two
parameters named ``"e"`` are still different variables.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any, Literal

CompareOp = Literal["eq", "ne", "lt", "le", "gt", "ge"]

_COMPARE_OPS: dict[str, Callable[[Any, Any], bool]] = {
    "eq": operator.eq,
    "ne": operator.ne,
    "lt": operator.lt,
    "le": operator.le,
    "gt": operator.gt,
    "ge": operator.ge,
}


class Expr:
    """Base class for predicate expression nodes."""

    __slots__ = ()


@dataclass(frozen=True, eq=False)
class Parameter(Expr):
    """A bound entity variable. Equality and hashing are by identity."""

    name: str = "e"

    def __repr__(self) -> str:
        return f"Parameter({self.name!r}@{id(self):x})"


@dataclass(frozen=True)
class Member(Expr):
    """Attribute access ``target.name``."""

    target: Expr
    name: str


@dataclass(frozen=True)
class Constant(Expr):
    value: Any


@dataclass(frozen=True)
class Compare(Expr):
    """Binary comparison ``left <op> right``."""

    op: CompareOp
    left: Expr
    right: Expr

    def __post_init__(self) -> None:
        if self.op not in _COMPARE_OPS:
            raise ValueError(f"Unknown comparison operator: {self.op!r}")


@dataclass(frozen=True)
class Contains(Expr):
    """Substring match of ``needle`` in ``subject``."""

    subject: Expr
    needle: Expr
    ignore_case: bool = True


@dataclass(frozen=True)
class In(Expr):
    """Membership of ``subject`` in a fixed set of values."""

    subject: Expr
    values: tuple[Any, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class AndAlso(Expr):
    left: Expr
    right: Expr


@dataclass(frozen=True)
class OrElse(Expr):
    left: Expr
    right: Expr


@dataclass(frozen=True)
class Not(Expr):
    operand: Expr


def member_path(parameter: Parameter, path: str) -> Expr:
    """Build a member chain for a dotted *path* rooted at *parameter*."""
    node: Expr = parameter
    for name in path.split("."):
        node = Member(node, name)
    return node


def split_member_path(node: Expr) -> tuple[Parameter, str] | None:
    """Return ``(parameter, "a.b.c")`` if *node* is a member chain, else ``None``."""
    names: list[str] = []
    while isinstance(node, Member):
        names.append(node.name)
        node = node.target
    if isinstance(node, Parameter) and names:
        return node, ".".join(reversed(names))
    return None


def substitute(node: Expr, old: Parameter, new: Parameter) -> Expr:
    """Rewrite *node*, replacing every occurrence of *old* with *new*.

    Unchanged subtrees are returned as-is.
    """
    if node is old:
        return new
    if isinstance(node, (Parameter, Constant)):
        return node
    changes: dict[str, Any] = {}
    for f in fields(node):  # type: ignore[arg-type]
        child = getattr(node, f.name)
        if isinstance(child, Expr):
            rewritten = substitute(child, old, new)
            if rewritten is not child:
                changes[f.name] = rewritten
    return replace(node, **changes) if changes else node  # type: ignore[type-var]


def free_parameters(node: Expr) -> set[Parameter]:
    """Collect every :class:`Parameter` referenced in *node*."""
    if isinstance(node, Parameter):
        return {node}
    if isinstance(node, Constant):
        return set()
    found: set[Parameter] = set()
    for f in fields(node):  # type: ignore[arg-type]
        child = getattr(node, f.name)
        if isinstance(child, Expr):
            found |= free_parameters(child)
    return found


class _Fanout(tuple):
    """Values read through a collection; leaf checks match if any value does."""

    __slots__ = ()


def _member(target: Any, name: str) -> Any:
    if target is None:
        return None
    if isinstance(target, (list, tuple)):
        values: list[Any] = []
        for item in target:
            value = _member(item, name)
            values.extend(value if isinstance(value, _Fanout) else (value,))
        return _Fanout(values)
    return getattr(target, name)


def resolve_path(obj: Any, path: str) -> Any:
    """Read a dotted attribute path from *obj*; ``None`` short-circuits."""
    for name in path.split("."):
        if obj is None:
            return None
        obj = getattr(obj, name)
    return obj


def _compare(op: str, left: Any, right: Any) -> bool:
    if isinstance(left, _Fanout):
        return any(_compare(op, value, right) for value in left)
    if op not in ("eq", "ne") and (left is None or right is None):
        return False
    return _COMPARE_OPS[op](left, right)


def _contains(subject: Any, needle: Any, ignore_case: bool) -> bool:
    if isinstance(subject, _Fanout):
        return any(_contains(value, needle, ignore_case) for value in subject)
    if subject is None or needle is None:
        return False
    # Same folding as SQL lower(); casefold() would also expand ß to ss.
    if ignore_case:
        return str(needle).lower() in str(subject).lower()
    return str(needle) in str(subject)


def evaluate(node: Expr, bindings: Mapping[Parameter, Any]) -> Any:
    """Interpret *node* against Python objects bound in *bindings*.

    A member path that passes through a list or tuple reads the rest of the
    path from every element, and a comparison, substring or membership test
    on the result holds when it holds for any element.
    """
    if isinstance(node, Parameter):
        return bindings[node]
    if isinstance(node, Constant):
        return node.value
    if isinstance(node, Member):
        return _member(evaluate(node.target, bindings), node.name)
    if isinstance(node, Compare):
        return _compare(node.op, evaluate(node.left, bindings), evaluate(node.right, bindings))
    if isinstance(node, Contains):
        return _contains(evaluate(node.subject, bindings), evaluate(node.needle, bindings), node.ignore_case)
    if isinstance(node, In):
        subject = evaluate(node.subject, bindings)
        if isinstance(subject, _Fanout):
            return any(value in node.values for value in subject)
        return subject in node.values
    if isinstance(node, AndAlso):
        return bool(evaluate(node.left, bindings)) and bool(evaluate(node.right, bindings))
    if isinstance(node, OrElse):
        return bool(evaluate(node.left, bindings)) or bool(evaluate(node.right, bindings))
    if isinstance(node, Not):
        return not evaluate(node.operand, bindings)
    raise TypeError(f"Unsupported expression node: {type(node).__name__}")


@dataclass(frozen=True)
class Predicate:
    """A boolean expression over one entity variable: ``parameter => body``."""

    parameter: Parameter
    body: Expr

    def __post_init__(self) -> None:
        stray = free_parameters(self.body) - {self.parameter}
        if stray:
            raise ValueError(f"Predicate body references unbound parameters: {sorted(p.name for p in stray)}")

    # ------------------------------------------------------------------
    # Single-field factories
    # ------------------------------------------------------------------

    @staticmethod
    def compare(path: str, op: CompareOp, value: Any) -> Predicate:
        p = Parameter()
        return Predicate(p, Compare(op, member_path(p, path), Constant(value)))

    @staticmethod
    def eq(path: str, value: Any) -> Predicate:
        return Predicate.compare(path, "eq", value)

    @staticmethod
    def icontains(path: str, value: str) -> Predicate:
        p = Parameter()
        return Predicate(p, Contains(member_path(p, path), Constant(value), ignore_case=True))

    @staticmethod
    def contains(path: str, value: str) -> Predicate:
        p = Parameter()
        return Predicate(p, Contains(member_path(p, path), Constant(value), ignore_case=False))

    @staticmethod
    def in_list(path: str, values: Iterable[Any]) -> Predicate:
        p = Parameter()
        return Predicate(p, In(member_path(p, path), tuple(values)))

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def rebind(self, parameter: Parameter) -> Predicate:
        """Return this predicate expressed over *parameter*."""
        if parameter is self.parameter:
            return self
        return Predicate(parameter, substitute(self.body, self.parameter, parameter))

    def and_also(self, other: Predicate) -> Predicate:
        """Logical AND; *other* is rewritten onto this predicate's variable."""
        return Predicate(self.parameter, AndAlso(self.body, other.rebind(self.parameter).body))

    def or_else(self, other: Predicate) -> Predicate:
        """Logical OR; *other* is rewritten onto this predicate's variable."""
        return Predicate(self.parameter, OrElse(self.body, other.rebind(self.parameter).body))

    def negate(self) -> Predicate:
        return Predicate(self.parameter, Not(self.body))

    def matches(self, entity: Any) -> bool:
        """Evaluate this predicate against a single entity instance."""
        return bool(evaluate(self.body, {self.parameter: entity}))
