"""
wacloud CLI main module.

Offline price lookups plus a quick look at the configured account's
message templates.
"""

import asyncio

import aiohttp
import typer

from wacloud.core.config.settings import settings
from wacloud.core.exceptions import WacloudError
from wacloud.core.logging.logger import setup_app_logging
from wacloud.messaging.whatsapp.models.template_models import TemplateListParams
from wacloud.pricing.models import ConversationCategory, PricingTable
from wacloud.pricing.resolver import PriceResolver, load_bundled_pricing_table
from wacloud.sdk import WhatsAppSdk

app = typer.Typer(help="wacloud WhatsApp Cloud API client CLI")


@app.callback()
def main():
    """Configure logging from the environment before any command runs."""
    setup_app_logging()


@app.command()
def price(
    number: str = typer.Argument(..., help="Destination phone number (E.164)"),
    category: str = typer.Argument(..., help="Conversation category"),
    region: str | None = typer.Option(
        None, "--region", "-r", help="Region for national-format numbers (e.g. US)"
    ),
    table: str | None = typer.Option(
        None, "--table", "-t", help="Path to an alternate JSON pricing table"
    ),
):
    """
    Look up the price of a conversation.

    Examples:
        wacloud price +14155551234 marketing
        wacloud price 4155551234 utility --region US
    """
    try:
        pricing_table = (
            PricingTable.from_json_file(table) if table else load_bundled_pricing_table()
        )
        amount = PriceResolver(pricing_table).resolve(number, category, region)
    except (WacloudError, ValueError) as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1) from None

    typer.echo(f"{amount} {pricing_table.currency}")


@app.command()
def categories():
    """List the conversation categories accepted by `price`."""
    for item in ConversationCategory:
        note = " (free)" if item.is_free else ""
        typer.echo(f"{item.value}{note}")


@app.command()
def templates(
    limit: int = typer.Option(25, "--limit", "-l", help="Templates per page"),
    after: str | None = typer.Option(None, "--after", help="Paging cursor"),
):
    """
    List the message templates of the configured business account.

    Requires WP_ACCESS_TOKEN, WP_PHONE_ID and WP_BID.
    """
    try:
        page = asyncio.run(_list_templates(limit, after))
    except (WacloudError, ValueError, aiohttp.ClientError) as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1) from None

    if not page.data:
        typer.echo("No templates found")
        return

    for template in page.data:
        status = template.status.value if template.status else "-"
        typer.echo(
            f"{template.name}\t{template.language or '-'}\t{status}\t{template.id}"
        )

    if page.next_cursor:
        typer.echo(f"Next page: --after {page.next_cursor}")


async def _list_templates(limit: int, after: str | None):
    settings.require_credentials(business=True)
    async with aiohttp.ClientSession() as session:
        sdk = WhatsAppSdk.from_settings(session)
        return await sdk.templates.list_templates(
            TemplateListParams(
                fields=["id", "name", "language", "status", "category"],
                limit=limit,
                after=after,
            )
        )


if __name__ == "__main__":
    app()
