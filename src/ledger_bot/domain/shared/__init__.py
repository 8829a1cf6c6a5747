"""
Utilidades compartidas del dominio.

Estas funciones son usadas por el parser, el motor del ledger y los
adaptadores, y no dependen de ninguna librería externa. Solo operan sobre
tipos nativos de Python.

Uso:
    from ledger_bot.domain.shared.money import normalize_amount, parse_money_safe, format_brl
    from ledger_bot.domain.shared.date_resolver import brasilia_now, resolve_date
    from ledger_bot.domain.shared.month_map import month_name, previous_month
    from ledger_bot.domain.shared.a1_notation import column_to_letter, split_range
    from ledger_bot.domain.shared.text_cleaner import normalize_command_text
"""
