"""
CLI commands for the certification registry.
"""

import sys
from typing import Optional

import click
from loguru import logger

from ...exceptions import RecordNotFoundError
from ...surfaces.registry import RegistryBrowser
from .common import echo_json, get_catalog


@click.command(name="registry")
@click.option("--query", "-q", default="", help="Free text (id, organization, system, scope)")
@click.option("--level", default=None, help="L1, L2 or L3")
@click.option("--industry", default=None, help="Industry (exact)")
@click.option("--status", default=None, help="Certification status")
@click.option("--monitoring", default=None, help="Monitoring status")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON")
@click.pass_context
def list_registry(ctx: click.Context, query: str, level: Optional[str], industry: Optional[str],
                  status: Optional[str], monitoring: Optional[str], as_json: bool):
    """List registry entries matching the free text and every given facet."""
    catalog = get_catalog(ctx)
    browser = RegistryBrowser(catalog.registry)
    
    browser.set_query(query)
    for name, value in (
        ("level", level),
        ("industry", industry),
        ("status", status),
        ("monitoring", monitoring),
    ):
        browser.set_facet(name, value)
    
    if as_json:
        echo_json({
            "count": browser.view.total,
            "data": [e.model_dump(mode="json", by_alias=True) for e in browser.visible],
        })
        return
    
    click.echo(browser.summary())
    if not browser.visible:
        click.echo("No registry entries match the current filters.")
    for entry in browser.visible:
        click.echo(
            f"  {entry.certification_id}  {entry.organization} — {entry.system_name}  "
            f"[{entry.certification_level.value} | {entry.certification_status.value} | "
            f"{entry.monitoring_status.value} | {entry.industry}]"
        )


@click.command(name="verify")
@click.argument("certification_id")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON")
@click.pass_context
def verify(ctx: click.Context, certification_id: str, as_json: bool):
    """Verify a certification by its ID (e.g. ARA-2026-00142)."""
    catalog = get_catalog(ctx)
    browser = RegistryBrowser(catalog.registry)
    
    entry = browser.find(certification_id)
    try:
        record = browser.verification(entry.certification_id if entry else certification_id)
    except RecordNotFoundError as e:
        if as_json:
            echo_json({
                "certificationId": certification_id,
                "status": "NOT_FOUND",
                "message": str(e),
                "verified": False,
            })
        else:
            logger.error(str(e))
        sys.exit(1)
    
    if as_json:
        echo_json(record)
        return
    
    verdict = "VERIFIED" if record["verified"] else "NOT VERIFIED"
    click.echo(f"{record['certificationId']}: {verdict} ({record['status']})")
    click.echo(f"  {record['organization']} — {record['systemName']}")
    click.echo(f"  Level {record['certificationLevel']}, monitoring {record['monitoringStatus']}")
    click.echo(f"  Valid {record['issueDate']} to {record['expiryDate']}")
    click.echo(f"  {record['registryUrl']}")
