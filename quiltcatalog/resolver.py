from typing import Optional
from urllib.parse import quote

from rich.markup import escape

from .errors import InvalidSnapshot
from .meta_api import LOOM_COORDINATE, QFAPI_COORDINATE, QuiltMetaClient
from .models import Versions
from .selection import (
    select_loader_version,
    select_loom_version,
    select_mappings_version,
    select_minecraft_version,
    select_qfapi_version,
)
from .utils import console


def resolve_versions(client: QuiltMetaClient, minecraft: Optional[str] = None, verbose: bool = False) -> Versions:
    """Run the lookups in order and return one consistent toolchain snapshot.

    Mappings and Quilted Fabric API depend on the resolved Minecraft version,
    so the order is fixed. Any error aborts the whole resolution.
    """
    if minecraft is None:
        if verbose:
            console.print(f"[dim]Fetching {escape(client.meta_endpoint('game'))}[/]")
        minecraft = select_minecraft_version(client.fetch_meta("game"))
        console.print(f"[yellow]Using latest Minecraft version ({escape(minecraft)})[/]")
    elif not minecraft:
        raise InvalidSnapshot("minecraft", minecraft)

    if verbose:
        console.print(f"[dim]Fetching {escape(client.meta_endpoint('loader'))}[/]")
    loader = select_loader_version(client.fetch_meta("loader"))

    mappings_path = f"quilt-mappings/{quote(minecraft, safe='')}"
    if verbose:
        console.print(f"[dim]Fetching {escape(client.meta_endpoint(mappings_path))}[/]")
    mappings = select_mappings_version(client.fetch_meta(mappings_path), minecraft)

    if verbose:
        console.print(f"[dim]Fetching {escape(client.maven_metadata_url(LOOM_COORDINATE))}[/]")
    loom = select_loom_version(client.fetch_maven_versions(LOOM_COORDINATE))

    if verbose:
        console.print(f"[dim]Fetching {escape(client.maven_metadata_url(QFAPI_COORDINATE))}[/]")
    qfapi = select_qfapi_version(client.fetch_maven_versions(QFAPI_COORDINATE), minecraft)

    if verbose:
        console.print(f"  [green]+[/] Minecraft: {escape(minecraft)}")
        console.print(f"  [green]+[/] Quilt Loader: {escape(loader)}")
        console.print(f"  [green]+[/] Quilt Mappings: {escape(mappings)}")
        console.print(f"  [green]+[/] Quilt Loom: {escape(loom)}")
        if qfapi:
            console.print(f"  [green]+[/] Quilted Fabric API: {escape(qfapi)}")
    if not qfapi:
        console.print(f"[yellow]Warning: no Quilted Fabric API build found for Minecraft {escape(minecraft)}[/]")

    return Versions(minecraft=minecraft, loader=loader, mappings=mappings, loom=loom, qfapi=qfapi)
