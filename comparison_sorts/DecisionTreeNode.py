from collections.abc import Sequence
from typing import Generic, Optional, TypeVar
from weakref import proxy

Container = TypeVar("Container", bound=Sequence[int])


def _idx_name(x: int, use_letter: bool) -> str:
    return chr(ord("a") + x) if use_letter else f"[{x}]"


def _label_name(x: int, use_letter: bool) -> str:
    return chr(ord("a") + x) if use_letter else str(x)


class DecisionTreeNode(Generic[Container]):
    def __init__(self, parent: Optional["DecisionTreeNode"] = None, is_left: bool = False) -> None:
        self.id = 0 if parent is None else parent.id * 2 + (2 - int(is_left))
        self.idx_array: Optional[Container] = None
        self.cmp_xy: Optional[tuple[int, int]] = None
        self.val_arrays: list[Container] = []
        self.left: Optional[DecisionTreeNode] = None
        self.right: Optional[DecisionTreeNode] = None
        self.parent = None if parent is None else proxy(parent)

    @property
    def is_leaf(self) -> bool:
        return self.cmp_xy is None

    @property
    def is_left(self) -> bool:
        return self.parent.left is self

    @property
    def depth(self) -> int:
        depth, node = 0, self
        while node.parent is not None:
            depth += 1
            node = node.parent
        return depth

    def get_label(self, use_letter: bool = True) -> str:
        return f"({','.join(_label_name(x, use_letter) for x in self.idx_array)})"

    def edge_label(self, use_letter: bool = True) -> str:
        "The comparison outcome that leads from the parent to this node, e.g. `a<b`"
        x, y = (_idx_name(i, use_letter) for i in self.parent.cmp_xy)
        return f"{x}<{y}" if self.is_left else f"{x}>{y}"

    __slots__ = ["id", "idx_array", "cmp_xy", "val_arrays", "left", "right", "parent", "__weakref__"]
