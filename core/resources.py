# =============================================================================
# core/resources.py  —  Resource Taxonomy (the firewall "object catalog")
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Declares which resource types the list_resources tool may ask the
#   firewall for, grouped into four fixed categories.
#
# THIS IS DATA, NOT LOGIC:
#   Adding or removing a name here changes what list_resources accepts.
#   Nothing else in the codebase needs to change.  The remote REST API
#   namespaces every type under /Objects/<type>, so the category is only
#   used for validation, never for building the URL.
#
#   Names are unique within a category but may repeat across categories.
#   Always qualify a lookup by category.
# =============================================================================

from types import MappingProxyType
from typing import Mapping


_OBJECTS = (
    "Addresses", "AddressGroups", "Regions", "DynamicUserGroups",
    "Applications", "ApplicationGroups", "ApplicationFilters",
    "Services", "ServiceGroups", "Tags", "GlobalProtectHIPObjects",
    "GlobalProtectHIPProfiles", "ExternalDynamicLists",
    "CustomDataPatterns", "CustomSpywareSignatures",
    "CustomVulnerabilitySignatures", "CustomURLCategories",
    "AntivirusSecurityProfiles", "AntiSpywareSecurityProfiles",
    "VulnerabilityProtectionSecurityProfiles",
    "URLFilteringSecurityProfiles", "FileBlockingSecurityProfiles",
    "WildFireAnalysisSecurityProfiles", "DataFilteringSecurityProfiles",
    "DoSProtectionSecurityProfiles", "SecurityProfileGroups",
    "LogForwardingProfiles", "AuthenticationEnforcements",
    "DecryptionProfiles", "PacketBrokerProfiles",
    "SDWANPathQualityProfiles", "SDWANTrafficDistributionProfiles",
    "SDWANSaasQualityProfiles", "SDWANErrorCorrection", "Schedules",
)

_POLICIES = (
    "SecurityRules", "NATRules", "QoSRules",
    "PolicyBasedForwardingRules", "DecryptionRules",
    "NetworkPacketBrokerRules", "TunnelInspectionRules",
    "ApplicationOverrideRules", "AuthenticationRules",
    "DoSRules", "SDWANRules",
)

# "TunnelIntefaces" is spelled the way the firewall API publishes it.
_NETWORK = (
    "EthernetInterfaces", "AggregateEthernetInterfaces",
    "VLANInterfaces", "LoopbackInterfaces", "TunnelIntefaces",
    "SDWANInterfaces", "Zones", "VLANs", "VirtualWires",
    "VirtualRouters", "IPSecTunnels", "GRETunnels",
    "DHCPServers", "DHCPRelays", "DNSProxies",
    "GlobalProtectPortals", "GlobalProtectGateways",
    "GlobalProtectGatewayAgentTunnels",
    "GlobalProtectGatewaySatelliteTunnels",
    "GlobalProtectGatewayMDMServers",
    "GlobalProtectClientlessApps",
    "GlobalProtectClientlessAppGroups",
    "QoSInterfaces", "LLDP",
    "GlobalProtectIPSecCryptoNetworkProfiles",
    "IKEGatewayNetworkProfiles", "IKECryptoNetworkProfiles",
    "MonitorNetworkProfiles",
    "InterfaceManagementNetworkProfiles",
    "ZoneProtectionNetworkProfiles", "QoSNetworkProfiles",
    "LLDPNetworkProfiles", "BFDNetworkProfiles",
    "SDWANInterfaceProfiles",
)

_DEVICES = (
    "VirtualSystems", "SNMPTrapServerProfiles",
    "SyslogServerProfiles", "EmailServerProfiles",
    "HttpServerProfiles", "LDAPServerProfiles",
)


# -----------------------------------------------------------------------------
# RESOURCE_CATEGORIES — category name → ordered tuple of resource types
# -----------------------------------------------------------------------------
# MappingProxyType + tuples: nobody can add a category or append a type
# at runtime.
# -----------------------------------------------------------------------------
RESOURCE_CATEGORIES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "OBJECTS": _OBJECTS,
    "POLICIES": _POLICIES,
    "NETWORK": _NETWORK,
    "DEVICES": _DEVICES,
})


def category_names() -> list[str]:
    """Return the category keys in declaration order."""
    return list(RESOURCE_CATEGORIES)


def is_category(name: object) -> bool:
    """True if ``name`` is one of the four category keys."""
    return isinstance(name, str) and name in RESOURCE_CATEGORIES


def resource_types(category: str) -> tuple[str, ...]:
    """Return the resource types of ``category``.

    Raises:
        KeyError: if ``category`` is not a known category.
    """
    return RESOURCE_CATEGORIES[category]


def is_resource_type(category: str, resource_type: object) -> bool:
    """True if ``resource_type`` belongs to ``category``."""
    if not is_category(category):
        return False
    return resource_type in RESOURCE_CATEGORIES[category]
