"""
Test Data Factories

factory_boy factories producing raw navigation records.

Usage:
    from tests.support.factories import NavLeafRecordFactory

    record = NavLeafRecordFactory.build(menu="Pools")
"""

from tests.support.factories.navigation_factory import (
    NavBranchRecordFactory,
    NavLeafRecordFactory,
)

__all__ = ["NavBranchRecordFactory", "NavLeafRecordFactory"]
