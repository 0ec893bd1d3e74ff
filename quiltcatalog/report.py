from typing import List

from .models import Versions

QFAPI_MISSING_COMMENT = "# Compatible Quilted Fabric API not found; check manually."


def format_gradle_catalog(versions: Versions) -> str:
    """Render ``versions`` as a Gradle version catalog (libs.versions.toml)."""
    catalog: List[str] = []

    catalog.append("[versions]")
    catalog.append(f'minecraft = "{versions.minecraft}"')
    catalog.append(f'quilt_loader = "{versions.loader}"')
    catalog.append(f'quilt_mappings = "{versions.mappings}"')
    catalog.append("")
    if versions.qfapi:
        catalog.append(f'quilted_fabric_api = "{versions.qfapi}"')
        qfapi_prefix = ""
    else:
        catalog.append(QFAPI_MISSING_COMMENT)
        qfapi_prefix = "# "
    catalog.append("")

    catalog.append("[libraries]")
    catalog.append('minecraft = { module = "com.mojang:minecraft", version.ref = "minecraft" }')
    catalog.append('quilt_loader = { module = "org.quiltmc:quilt-loader", version.ref = "quilt_loader" }')
    catalog.append('quilt_mappings = { module = "org.quiltmc:quilt-mappings", version.ref = "quilt_mappings" }')
    catalog.append("")
    catalog.append(
        f"{qfapi_prefix}quilted_fabric_api = "
        '{ module = "org.quiltmc.quilted-fabric-api:quilted-fabric-api", version.ref = "quilted_fabric_api" }'
    )
    catalog.append("")

    catalog.append("[plugins]")
    catalog.append(f'quilt_loom = {{ id = "org.quiltmc.loom", version = "{versions.loom}" }}')

    return "\n".join(catalog)
