"""
Utilidades compartidas del dominio.

Funciones puras usadas por modelos, servicios y adaptadores. No dependen
de ninguna librería externa: solo operan sobre tipos nativos de Python.

Uso:
    from src.domain.shared.money import parse_money, to_decimal, format_money
    from src.domain.shared.month_map import month_index, month_name
    from src.domain.shared.date_parser import latest_date, default_closing_date
    from src.domain.shared.text_cleaner import normalize_period_text, clean_pdf_text
    from src.domain.shared.currency import normalize_currency_code
"""
