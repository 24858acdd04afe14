"""Expected sidebar layout of the dashboard.

Components marked ``cd-error`` are screens that render the error placeholder
on a cluster without the backing service (NFS gateway, orchestrator, RBD).
"""

from types import MappingProxyType
from typing import Final

from dashnav.models.navigation import NavBranch, NavLeaf, PageDescriptor

PAGES: Final = MappingProxyType(
    {
        "index": PageDescriptor(url="#/dashboard", id="cd-dashboard"),
    }
)

NAVIGATIONS: Final[tuple[NavLeaf | NavBranch, ...]] = (
    NavLeaf(menu="NFS", component="cd-error"),
    NavBranch(
        menu="Object Gateway",
        submenus=(
            NavLeaf(menu="Daemons", component="cd-rgw-daemon-list"),
            NavLeaf(menu="Users", component="cd-rgw-user-list"),
            NavLeaf(menu="Buckets", component="cd-rgw-bucket-list"),
        ),
    ),
    NavLeaf(menu="Dashboard", component="cd-dashboard"),
    NavBranch(
        menu="Cluster",
        submenus=(
            NavLeaf(menu="Hosts", component="cd-hosts"),
            NavLeaf(menu="Physical Disks", component="cd-error"),
            NavLeaf(menu="Monitors", component="cd-monitor"),
            NavLeaf(menu="Services", component="cd-error"),
            NavLeaf(menu="OSDs", component="cd-osd-list"),
            NavLeaf(menu="Configuration", component="cd-configuration"),
            NavLeaf(menu="CRUSH map", component="cd-crushmap"),
            NavLeaf(menu="Manager Modules", component="cd-mgr-module-list"),
            NavLeaf(menu="Ceph Users", component="cd-crud-table"),
            NavLeaf(menu="Logs", component="cd-logs"),
            NavLeaf(menu="Alerts", component="cd-prometheus-tabs"),
        ),
    ),
    NavLeaf(menu="Pools", component="cd-pool-list"),
    NavBranch(
        menu="Block",
        submenus=(
            NavLeaf(menu="Images", component="cd-error"),
            NavLeaf(menu="Mirroring", component="cd-mirroring"),
            NavLeaf(menu="iSCSI", component="cd-iscsi"),
        ),
    ),
    NavLeaf(menu="File Systems", component="cd-cephfs-list"),
)
