"""
CLI commands for the ACR library.
"""

import sys
from typing import Optional

import click
from loguru import logger

from ...surfaces.control_library import ControlLibrary
from .common import echo_json, get_catalog


@click.command(name="controls")
@click.option("--query", "-q", default="", help="Free text (id, title, description, domain)")
@click.option("--domain", default=None, help="Domain id (e.g. 7)")
@click.option("--level", default=None, help="Certification level: L1, L2 or L3")
@click.option("--method", default=None, help="Evaluation method: AT, HS, EI or CM")
@click.option("--classification", default=None, help="Blocking or Conditional")
@click.option("--min-risk", default=None, type=int, help="Minimum risk weight (inclusive)")
@click.option("--fragment", default=None, help="Deep-link fragment to expand (e.g. ACR-7.01)")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON")
@click.pass_context
def list_controls(ctx: click.Context, query: str, domain: Optional[str], level: Optional[str],
                  method: Optional[str], classification: Optional[str], min_risk: Optional[int],
                  fragment: Optional[str], as_json: bool):
    """List controls matching the free text and every given facet."""
    catalog = get_catalog(ctx)
    library = ControlLibrary(catalog.controls, catalog.domains, fragment=fragment)
    
    library.set_query(query)
    for name, value in (
        ("domain", domain),
        ("level", level),
        ("method", method),
        ("classification", classification),
        ("min_risk", min_risk),
    ):
        library.set_facet(name, value)
    
    if as_json:
        echo_json({
            "count": library.view.total,
            "totalInLibrary": library.view.corpus_size,
            "expanded": sorted(library.expansion.snapshot()),
            "data": [c.model_dump(mode="json", by_alias=True) for c in library.visible],
        })
        return
    
    click.echo(library.summary())
    for control in library.visible:
        levels = "/".join(
            lvl for lvl in ("L1", "L2", "L3") if control.level_applicability.applies(lvl)
        )
        click.echo(
            f"  {control.id:<10} {control.title}  "
            f"[{control.evaluation_method.value} | risk {control.risk_weight}/10 | "
            f"{control.classification.value} | {levels or '-'}]"
        )
        if library.is_expanded(control.id):
            click.echo(f"      {control.description}")


@click.command(name="control")
@click.argument("control_id")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON")
@click.pass_context
def show_control(ctx: click.Context, control_id: str, as_json: bool):
    """Show one control with its related controls resolved."""
    catalog = get_catalog(ctx)
    library = ControlLibrary(catalog.controls, catalog.domains)
    
    control = library.get(control_id)
    if control is None:
        logger.error(f"ACR '{control_id}' not found.")
        sys.exit(1)
    
    related = library.related_controls(control_id)
    if as_json:
        payload = control.model_dump(mode="json", by_alias=True)
        payload["relatedControls"] = [
            {"id": ref, "title": rec.title if rec else None, "defined": rec is not None}
            for ref, rec in related
        ]
        echo_json(payload)
        return
    
    click.echo(f"{control.id} — {control.title}")
    click.echo(f"Domain: {control.domain_name}")
    click.echo(f"Evaluation: {control.evaluation_method.value} ({control.evaluation_method.label})")
    click.echo(f"Risk weight: {control.risk_weight}/10  Classification: {control.classification.value}")
    click.echo("")
    click.echo(control.description)
    if control.evidence_requirements:
        click.echo("\nEvidence requirements:")
        for requirement in control.evidence_requirements:
            click.echo(f"  - {requirement}")
    if related:
        click.echo("\nRelated controls:")
        for ref, rec in related:
            click.echo(f"  {ref}: {rec.title if rec else 'not yet defined'}")
