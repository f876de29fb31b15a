from __future__ import annotations

from typing import Any, Self, TypeVar, dataclass_transform

import pytreeclass as tc

T = TypeVar("T")


class TreeClass(tc.TreeClass):
    """Immutable pytree base class.

    Attributes can only be assigned inside ``__init__`` and ``__post_init__``. Afterwards every
    instance is read-only, so values built on top of this class can be shared freely.
    """

    def updated_copy(self, **kwargs: Any) -> Self:
        """Returns a new instance with some of the ``__init__`` attributes replaced.

        The copy is built through ``__init__``, so any validation in ``__post_init__`` runs again.

        Args:
            **kwargs: Dictionary mapping attribute names to their new values.

        Returns:
            Self: A newly instantiated object with the updated attributes.
        """
        init_args = {f.name: getattr(self, f.name) for f in tc.fields(self) if f.init}
        init_args.update(kwargs)
        return self.__class__(**init_args)


def frozen_field(
    *,
    default: Any,
    repr: bool = True,
) -> Any:
    """Creates a keyword-only field that automatically freezes on set and unfreezes on get.

    Frozen values are not pytree leaves, so jax transformations treat them as static structure
    instead of tracing them.

    Args:
        default (Any): The default value for the field.
        repr (bool, optional): Whether to include the field in __repr__. Defaults to True.

    Returns:
        Any: A Field instance configured with freeze/unfreeze behavior
    """
    return tc.field(
        default=default,
        repr=repr,
        kind="KW_ONLY",
        on_setattr=[tc.freeze],
        on_getattr=[tc.unfreeze],
    )


@dataclass_transform(
    field_specifiers=(frozen_field,),
    kw_only_default=True,
)
def autoinit(klass: type[T]) -> type[T]:
    """Wrapper around tc.autoinit that preserves parameter requirement information"""
    return tc.autoinit(klass)
