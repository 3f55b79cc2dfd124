"""
Tabular display of parsed VPP state.

Layouts follow the usual router "show" listings: fixed-width left-justified
columns and a single header row.
"""

from vppsh_lib.parsers import InterfaceRecord, RouteEntry

UNASSIGNED = "unassigned"

# (label, width); the last column is unpadded
INTERFACE_COLUMNS = (("Interface", 16), ("IP-Address", 20), ("MTU", 6), ("Status", 6), ("Protocol", 0))
BRIEF_COLUMNS = (("Interface", 24), ("IP-Address", 20), ("Status", 8), ("Protocol", 0))
ROUTE_COLUMNS = (("Destination", 20), ("Gateway", 18), ("Interface", 24), ("Type", 0))


def format_row(columns: tuple, values: list) -> str:
    """Pad each value to its column width, one space between columns."""
    cells = []
    for (_, width), value in zip(columns, values):
        cells.append(f"{value:<{width}}" if width else str(value))
    return " ".join(cells).rstrip()


def format_header(columns: tuple) -> str:
    return format_row(columns, [label for label, _ in columns])


def render_interface_table(records: list[InterfaceRecord]) -> str:
    """
    Render merged interface records as a 'show interfaces' table.

    An interface without addresses gets one row with "unassigned". An
    interface with several addresses gets one row per address; only the
    first row repeats the name, MTU and state columns.
    """
    lines = [format_header(INTERFACE_COLUMNS)]

    for record in records:
        addresses = record.addresses or [UNASSIGNED]
        lines.append(format_row(INTERFACE_COLUMNS, [
            record.name, addresses[0], record.mtu, record.status, record.status
        ]))
        for address in addresses[1:]:
            lines.append(format_row(INTERFACE_COLUMNS, ["", address, "", "", ""]))
        if record.truncated:
            lines.append(format_row(INTERFACE_COLUMNS, ["", "(+more)", "", "", ""]))

    return "\n".join(lines) + "\n"


def render_ip_brief(records: list[InterfaceRecord]) -> str:
    """Render one row per interface with its first address."""
    lines = [format_header(BRIEF_COLUMNS)]
    for record in records:
        address = record.addresses[0] if record.addresses else UNASSIGNED
        lines.append(format_row(BRIEF_COLUMNS, [record.name, address, record.status, record.status]))
    return "\n".join(lines) + "\n"


def render_route_table(routes: list[RouteEntry]) -> str:
    """Render FIB entries."""
    lines = [format_header(ROUTE_COLUMNS)]
    for route in routes:
        gateway = route.next_hop or ("connected" if route.kind == "glean" else "-")
        lines.append(format_row(ROUTE_COLUMNS, [
            route.prefix, gateway, route.interface or "-", route.kind
        ]))
    return "\n".join(lines) + "\n"
