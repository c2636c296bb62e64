"""Componentes de UI para la CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en varios comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

USAGE_TEXT = """\
from adapters.notion_client import NotionClient

# 1. Crear el cliente
client = NotionClient("your_token_here")

# 2. Obtener una página
page = client.get_page("your_page_id_here")

# 3. Usar los datos
print(page["properties"])
print(page["url"])
"""


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("notion-client", style="bold cyan")
    subtitle = Text("Smoke test de la API de Notion", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def mask_header_value(name: str, value: str) -> str:
    """Oculta el token: de `Bearer secret_abc` solo queda `Bearer secret_***`."""

    if name != "Authorization":
        return value
    return f"{value.split('_')[0]}_***"


def build_headers_table(headers: dict[str, str]) -> Table:
    table = Table(title="Headers")
    table.add_column("Header", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for name, value in headers.items():
        table.add_row(name, mask_header_value(name, value))
    return table


def build_api_error_hints() -> Panel:
    """Pistas para resolver un `NotionAPIError`."""

    body = Text()
    body.append("1. Check that the Notion token is valid\n")
    body.append("2. Check that the page/database id exists\n")
    body.append("3. Check that the integration has access to the page")
    return Panel(body, title=Text("Troubleshooting", style="bold yellow"), border_style="yellow")
