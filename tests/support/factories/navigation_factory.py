"""
Navigation Factory

Generates raw sidebar records in the ``{"menu", "component"|"submenus"}``
shape accepted by ``parse_navigations``.
"""

from __future__ import annotations

import factory
from faker import Faker

fake = Faker()


class NavLeafRecordFactory(factory.Factory):
    """
    Factory for leaf navigation records.

    Usage:
        record = NavLeafRecordFactory.build()
        records = NavLeafRecordFactory.build_batch(5)
    """

    class Meta:
        model = dict

    menu = factory.Sequence(lambda n: f"{fake.word().title()} {n:03d}")
    component = factory.LazyAttribute(
        lambda o: "cd-" + o.menu.lower().replace(" ", "-")
    )


class NavBranchRecordFactory(factory.Factory):
    """
    Factory for branch navigation records with leaf submenus.

    Usage:
        record = NavBranchRecordFactory.build()
        record = NavBranchRecordFactory.build(size=4)
    """

    class Meta:
        model = dict

    class Params:
        size = 3

    menu = factory.Sequence(lambda n: f"Group-{n:03d}")
    submenus = factory.LazyAttribute(
        lambda o: NavLeafRecordFactory.build_batch(o.size)
    )
