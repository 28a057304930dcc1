"""Error codes and user-facing messages.

This module defines the error catalog for statement import. Each error has:
- code: Unique identifier
- message: Technical description (for logs)
- user_message: Text shown to the user as a parse warning (Portuguese)

``user_message`` may contain ``str.format`` placeholders; pass the values
as keyword arguments to :func:`get_user_message`.
"""

ERROR_CATALOG: dict[str, dict] = {
    "PARSE_001": {
        "code": "PARSE_001",
        "message": "Unsupported statement file extension",
        "user_message": "Formato não suportado. Use PDF ou CSV.",
    },
    "PARSE_002": {
        "code": "PARSE_002",
        "message": "PDF decoding failed: corrupted or invalid file",
        "user_message": "Erro ao processar PDF. Tente exportar a fatura em CSV.",
    },
    "PARSE_003": {
        "code": "PARSE_003",
        "message": "PDF is password-protected",
        "user_message": "Este PDF é protegido por senha. Informe a senha e tente novamente.",
    },
    "PARSE_004": {
        "code": "PARSE_004",
        "message": "Incorrect password provided for encrypted PDF",
        "user_message": "A senha informada para o PDF está incorreta.",
    },
    "PARSE_005": {
        "code": "PARSE_005",
        "message": "No transactions could be extracted from the statement",
        "user_message": "Nenhuma transação válida encontrada no arquivo.",
    },
    "CAT_001": {
        "code": "CAT_001",
        "message": "Selected transactions without a category",
        "user_message": "{count} lançamento(s) sem categoria identificada.",
    },
    "API_002": {
        "code": "API_002",
        "message": "File size exceeds maximum limit",
        "user_message": "Arquivo muito grande. O tamanho máximo é {limit_mb} MB.",
    },
}


def get_error(error_code: str) -> dict:
    """Get error definition by code.

    Args:
        error_code: Error code from the catalog

    Returns:
        Dict with error details (a generic definition for unknown codes)
    """
    if error_code not in ERROR_CATALOG:
        return {
            "code": "UNKNOWN",
            "message": f"Unknown error code: {error_code}",
            "user_message": "Ocorreu um erro inesperado ao processar o arquivo.",
        }
    return ERROR_CATALOG[error_code]


def get_user_message(error_code: str, **params: object) -> str:
    """Get the user-facing message for an error code.

    Args:
        error_code: Error code from the catalog
        **params: Values for placeholders in the message

    Returns:
        Formatted user message
    """
    message = get_error(error_code)["user_message"]
    return message.format(**params) if params else message
