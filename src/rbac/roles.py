# src/rbac/roles.py
from types import MappingProxyType

from src.models.enums import BundleKind

# Permissions granted to the global group that manages customer accounts
DEFAULT_ACCOUNTS_MANAGER_ROLES = (
    "reaction:legacy:accounts/add:address-books",
    "reaction:legacy:accounts/add:emails",
    "reaction:legacy:accounts/create",
    "reaction:legacy:accounts/delete:emails",
    "reaction:legacy:accounts/invite:group",
    "reaction:legacy:accounts/read",
    "reaction:legacy:accounts/read:admin-accounts",
    "reaction:legacy:accounts/remove:address-books",
    "reaction:legacy:accounts/update:address-books",
    "reaction:legacy:accounts/update:currency",
    "reaction:legacy:accounts/update:emails",
    "reaction:legacy:accounts/update:language",
    "reaction:legacy:groups/manage:accounts",
    "reaction:legacy:groups/read",
)

# Permissions granted to the global group that administers the platform
DEFAULT_SYSTEM_MANAGER_ROLES = (
    "reaction:legacy:accounts/read:admin-accounts",
    "reaction:legacy:email-templates/read",
    "reaction:legacy:email-templates/update",
    "reaction:legacy:emails/read",
    "reaction:legacy:emails/send",
    "reaction:legacy:groups/create",
    "reaction:legacy:groups/delete",
    "reaction:legacy:groups/read",
    "reaction:legacy:groups/update",
    "reaction:legacy:shops/create",
    "reaction:legacy:shops/read",
    "reaction:legacy:shops/update",
    "reaction:system/manage",
)

# Permissions granted to a shop's manager group
DEFAULT_SHOP_MANAGER_ROLES = (
    "reaction:legacy:accounts/read",
    "reaction:legacy:carts/update",
    "reaction:legacy:discounts/create",
    "reaction:legacy:discounts/delete",
    "reaction:legacy:discounts/read",
    "reaction:legacy:discounts/update",
    "reaction:legacy:fulfillment/read",
    "reaction:legacy:fulfillment/update",
    "reaction:legacy:groups/read",
    "reaction:legacy:inventory/read",
    "reaction:legacy:inventory/update",
    "reaction:legacy:mediaRecords/create",
    "reaction:legacy:mediaRecords/delete",
    "reaction:legacy:mediaRecords/update",
    "reaction:legacy:navigationTrees/read",
    "reaction:legacy:navigationTrees/update",
    "reaction:legacy:orders/approve:payment",
    "reaction:legacy:orders/capture:payment",
    "reaction:legacy:orders/move:item",
    "reaction:legacy:orders/read",
    "reaction:legacy:orders/refund:payment",
    "reaction:legacy:orders/update",
    "reaction:legacy:products/archive",
    "reaction:legacy:products/clone",
    "reaction:legacy:products/create",
    "reaction:legacy:products/publish",
    "reaction:legacy:products/read",
    "reaction:legacy:products/update",
    "reaction:legacy:shipping-rates/update:settings",
    "reaction:legacy:shops/read",
    "reaction:legacy:tags/create",
    "reaction:legacy:tags/delete",
    "reaction:legacy:tags/read",
    "reaction:legacy:tags/update",
    "reaction:legacy:taxes/read",
    "reaction:legacy:taxRates/create",
    "reaction:legacy:taxRates/delete",
    "reaction:legacy:taxRates/read",
    "reaction:legacy:taxRates/update",
)

# Shop owners can do everything a manager can, plus shop-level administration
DEFAULT_SHOP_OWNER_ROLES = (
    *DEFAULT_SHOP_MANAGER_ROLES,
    "reaction:legacy:groups/create",
    "reaction:legacy:groups/delete",
    "reaction:legacy:groups/manage:accounts",
    "reaction:legacy:groups/update",
    "reaction:legacy:shops/owner",
    "reaction:legacy:shops/update",
    "reaction:legacy:shipping-rates/update",
    "reaction:legacy:taxes/update:settings",
)

DEFAULT_ROLES: MappingProxyType[BundleKind, tuple[str, ...]] = MappingProxyType(
    {
        BundleKind.ACCOUNTS_MANAGER: DEFAULT_ACCOUNTS_MANAGER_ROLES,
        BundleKind.SYSTEM_MANAGER: DEFAULT_SYSTEM_MANAGER_ROLES,
        BundleKind.SHOP_MANAGER: DEFAULT_SHOP_MANAGER_ROLES,
        BundleKind.SHOP_OWNER: DEFAULT_SHOP_OWNER_ROLES,
    }
)

# Kinds that inherit permissions from the primary shop's equivalent group
SHOP_GROUP_KINDS = frozenset({BundleKind.SHOP_MANAGER, BundleKind.SHOP_OWNER})


def catalog_for(kind: BundleKind | None) -> tuple[str, ...] | None:
    """Return the default permission set for a bundle kind, if it has one."""
    if kind is None:
        return None
    return DEFAULT_ROLES.get(kind)
