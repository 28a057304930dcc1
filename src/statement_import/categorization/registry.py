"""Read-only lookup of valid category ids.

The category taxonomy is owned by the ledger. The parser only needs to know
whether an id it inferred exists, so the registry exposes a small read-only
surface over an id -> Category mapping.
"""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict


class Category(BaseModel):
    """Category metadata as provided by the ledger."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    group: str = "outros"


class CategoryRegistry(Mapping[str, Category]):
    """Immutable id -> Category mapping."""

    def __init__(self, categories: Iterable[Category]):
        self._categories = MappingProxyType({c.id: c for c in categories})

    def exists(self, category_id: str | None) -> bool:
        return category_id is not None and category_id in self._categories

    def __getitem__(self, category_id: str) -> Category:
        return self._categories[category_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)


DEFAULT_CATEGORIES: tuple[Category, ...] = (
    Category(id="delivery", name="Delivery", group="alimentacao"),
    Category(id="alimentacao", name="Restaurantes / Lanches", group="alimentacao"),
    Category(id="mercado", name="Supermercado", group="alimentacao"),
    Category(id="uber_99", name="Uber / 99 / Táxi", group="transporte"),
    Category(id="combustivel", name="Combustível", group="transporte"),
    Category(id="estacionamento", name="Estacionamento", group="transporte"),
    Category(id="medicamentos", name="Farmácia", group="saude"),
    Category(id="academia", name="Academia", group="saude"),
    Category(id="plano_saude", name="Plano de Saúde", group="saude"),
    Category(id="lazer", name="Streaming / Lazer", group="lazer"),
    Category(id="viagem", name="Viagens", group="lazer"),
    Category(id="roupas", name="Roupas / Compras", group="outros"),
    Category(id="presentes", name="Presentes", group="outros"),
    Category(id="pet", name="Pet", group="outros"),
    Category(id="luz", name="Energia Elétrica", group="moradia"),
    Category(id="agua", name="Água / Saneamento", group="moradia"),
    Category(id="internet", name="Internet / Telefone", group="moradia"),
    Category(id="gas", name="Gás", group="moradia"),
    Category(id="aluguel", name="Aluguel", group="moradia"),
    Category(id="condominio", name="Condomínio", group="moradia"),
    Category(id="escola", name="Escola / Faculdade", group="educacao"),
    Category(id="cursos", name="Cursos", group="educacao"),
)


def default_registry() -> CategoryRegistry:
    """Registry holding every category the keyword rules can produce."""
    return CategoryRegistry(DEFAULT_CATEGORIES)
