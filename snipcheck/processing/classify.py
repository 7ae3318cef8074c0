# snipcheck/processing/classify.py

from __future__ import annotations
import ipaddress
from typing import Iterable, List, Optional, Sequence, Set

import pandas as pd

from snipcheck.errors import InvalidCIDRError, InvalidIPAddressError
from snipcheck.models import Server, Snip
from snipcheck.processing.masks import convert_mask
from snipcheck.utils.logging import get_logger

log = get_logger(__name__)

REPORT_COLUMNS = ["name", "ip_address", "line", "network", "matched"]


def snip_network(snip: Snip) -> ipaddress.IPv4Network:
    """
    Build the network a SNIP belongs to, host bits zeroed.

    "10.0.0.1" + "255.255.255.0" -> IPv4Network("10.0.0.0/24")
    """
    cidr = snip.ip_address + convert_mask(snip.subnet_mask, snip.line or None)
    try:
        return ipaddress.IPv4Network(cidr, strict=False)
    except ValueError as e:
        raise InvalidCIDRError(cidr, snip.line or None, str(e)) from e


def get_networks(snips: Iterable[Snip]) -> List[ipaddress.IPv4Network]:
    networks = [snip_network(snip) for snip in snips]
    log.info("Derived %d network(s) from SNIPs", len(networks))
    return networks


def server_address(server: Server) -> ipaddress.IPv4Address:
    try:
        return ipaddress.IPv4Address(server.ip_address)
    except ValueError:
        raise InvalidIPAddressError(server.ip_address, server.line or None) from None


def network_contains(network: ipaddress.IPv4Network, address: ipaddress.IPv4Address) -> bool:
    return address in network


def _first_containing(
        address: ipaddress.IPv4Address,
        networks: Sequence[ipaddress.IPv4Network],
) -> Optional[ipaddress.IPv4Network]:
    for network in networks:
        if network_contains(network, address):
            return network
    return None


def matched_addresses(
        servers: Iterable[Server],
        networks: Sequence[ipaddress.IPv4Network],
) -> Set[str]:
    """IP addresses of the servers that sit inside at least one network."""
    matched: Set[str] = set()
    for server in servers:
        address = server_address(server)
        network = _first_containing(address, networks)
        if network is not None:
            log.debug("%s (%s) is inside %s", server.name, server.ip_address, network)
            matched.add(server.ip_address)
    return matched


def find_unmatched(
        servers: Sequence[Server],
        networks: Sequence[ipaddress.IPv4Network],
) -> List[Server]:
    """
    Servers whose IP is not covered by any network, in config order.

    Every server address is validated, matched or not.
    """
    matched = matched_addresses(servers, networks)
    unmatched = [server for server in servers if server.ip_address not in matched]
    log.info(
        "%d of %d server(s) fall outside every SNIP network",
        len(unmatched),
        len(servers),
    )
    return unmatched


def classification_frame(
        servers: Sequence[Server],
        networks: Sequence[ipaddress.IPv4Network],
) -> pd.DataFrame:
    """
    One row per server with the first network (in SNIP order) that contains it.

    Columns: name, ip_address, line, network (str or None), matched (bool).
    """
    rows = []
    for server in servers:
        network = _first_containing(server_address(server), networks)
        rows.append({
            "name": server.name,
            "ip_address": server.ip_address,
            "line": server.line,
            "network": str(network) if network is not None else None,
            "matched": network is not None,
        })

    df = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    # keep None for unmatched rows; string inference would turn it into NaN
    df["network"] = pd.Series([row["network"] for row in rows], index=df.index, dtype=object)
    df["matched"] = df["matched"].astype(bool)
    return df
