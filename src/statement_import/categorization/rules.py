"""Deterministic transaction categorization.

Statements rarely carry a category or MCC, so one is inferred from the
description with an ordered keyword table. Matching is done on lower-cased,
accent-folded text so "Farmácia" and "FARMACIA" hit the same keyword.

Categorization is best-effort: an unmatched description, or a rule whose
category is missing from the registry, yields None.
"""

from __future__ import annotations

import re
import unicodedata

from statement_import.categorization.registry import CategoryRegistry, default_registry


def fold_text(text: str | None) -> str:
    """Lower-case ``text`` and strip diacritics (NFD, drop combining marks)."""
    decomposed = unicodedata.normalize("NFD", (text or "").lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_merchant(description: str | None) -> str:
    """Folded, whitespace-collapsed description used as a matching key."""
    return re.sub(r"\s+", " ", fold_text(description)).strip()


# Ordering matters: earlier matches win. Trailing spaces in keywords are
# intentional word boundaries ("bar " should not match "barbearia").
_RAW_RULES: list[tuple[tuple[str, ...], str]] = [
    (("ifood", "uber eats", "rappi", "delivery", "james"), "delivery"),
    (("restaurante", "lanchonete", "padaria", "pizza", "burger", "sushi", "bar ",
      "churrascaria", "cafeteria", "bistro", "cantina"), "alimentacao"),
    (("mercado", "supermercado", "atacadao", "assai", "carrefour", "pao de acucar",
      "extra ", "big ", "nacional", "zaffari", "dia ", "fort "), "mercado"),
    (("uber ", "99 ", "99app", "cabify", "taxi", "indrive"), "uber_99"),
    (("combustivel", "gasolina", "etanol", "shell", "posto", "ipiranga",
      "br distribuidora", "ale ", "petrobras"), "combustivel"),
    (("farmacia", "drogasil", "drogaria", "raia", "droga", "pague menos",
      "ultrafarma", "panvel"), "medicamentos"),
    (("netflix", "spotify", "amazon prime", "disney", "hbo", "youtube", "deezer",
      "globoplay", "paramount", "star+", "apple tv", "apple music"), "lazer"),
    (("academia", "smart fit", "gympass", "bio ritmo", "wellhub", "bluefit"), "academia"),
    (("estacionamento", "estapar", "zona azul", "park", "indigo"), "estacionamento"),
    (("renner", "c&a", "zara", "shein", "shopee", "magalu", "magazine", "americanas",
      "casas bahia", "centauro", "netshoes", "riachuelo", "marisa", "hering"), "roupas"),
    (("luz", "eletric", "celesc", "cemig", "cpfl", "enel", "energisa", "copel",
      "eletropaulo", "light"), "luz"),
    (("agua", "saneamento", "sabesp", "copasa", "casan", "embasa", "compesa"), "agua"),
    (("internet", "vivo", "claro", "tim ", "oi ", "algar"), "internet"),
    (("gas ", "gás", "comgas", "ultragaz", "supergasbras", "liquigas"), "gas"),
    (("aluguel", "rent", "imobiliaria"), "aluguel"),
    (("condominio", "condomínio"), "condominio"),
    (("escola", "faculdade", "universidade", "unesp", "unicamp", "usp", "senac",
      "senai", "mensalidade escolar"), "escola"),
    (("curso", "udemy", "alura", "hotmart", "eduzz"), "cursos"),
    (("viagem", "hotel", "booking", "airbnb", "latam", "gol ", "azul ", "decolar",
      "hurb", "123milhas"), "viagem"),
    (("pet", "petz", "cobasi", "veterinar"), "pet"),
    (("plano de saude", "unimed", "amil", "bradesco saude", "sulamerica"), "plano_saude"),
    (("presente", "gift"), "presentes"),
]

CATEGORY_RULES: tuple[tuple[tuple[str, ...], str], ...] = tuple(
    (tuple(dict.fromkeys(fold_text(k) for k in keywords)), category_id)
    for keywords, category_id in _RAW_RULES
)

_default_registry = default_registry()


def match_rule(description: str | None) -> str | None:
    """Return the category id of the first matching rule, ignoring the registry."""
    text = normalize_merchant(description)
    if not text:
        return None

    for keywords, category_id in CATEGORY_RULES:
        if any(keyword in text for keyword in keywords):
            return category_id
    return None


def categorize(description: str | None, registry: CategoryRegistry | None = None) -> str | None:
    """Infer a category id from a cleaned description.

    Args:
        description: Cleaned transaction description
        registry: Valid categories (default: the built-in registry)

    Returns:
        Category id, or None when no rule matched or the matched id is not
        in the registry
    """
    category_id = match_rule(description)
    if category_id is None:
        return None

    registry = registry if registry is not None else _default_registry
    return category_id if registry.exists(category_id) else None
