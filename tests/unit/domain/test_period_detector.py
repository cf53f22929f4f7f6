"""
Tests para src.domain.services.period_detector
"""

from decimal import Decimal

from src.domain.models.detected_period import DetectedPeriod
from src.domain.models.page_text import PageText
from src.domain.models.word_info import WordInfo
from src.domain.services.period_detector import (
    detect_periods,
    extract_selection,
    select_at_position,
)


def _page(num: int, text: str, words=None) -> PageText:
    return PageText(page_num=num, text=text, words=words or [])


class TestDetectPeriods:
    def test_un_mes_por_pagina(self):
        pages = [
            _page(1, "02/01/2024 Deposit\n31/01/2024 Closing"),
            _page(2, "01/02/2024 Opening\n29/02/2024 Closing"),
        ]

        detected = detect_periods(pages)

        assert detected == [
            DetectedPeriod(month=0, year=2024, page=1, last_date="31/01/2024"),
            DetectedPeriod(month=1, year=2024, page=2, last_date="29/02/2024"),
        ]

    def test_mes_repetido_conserva_primera_pagina(self):
        pages = [
            _page(1, "05/03/2024 ..."),
            _page(2, "20/03/2024 ..."),
            _page(3, "31/03/2024 ..."),
        ]

        detected = detect_periods(pages)

        assert detected == [DetectedPeriod(month=2, year=2024, page=1, last_date="31/03/2024")]

    def test_toma_la_fecha_mas_reciente_no_la_ultima(self):
        pages = [_page(1, "31/01/2024 cierre\n15/01/2024 movimiento")]

        assert detect_periods(pages)[0].last_date == "31/01/2024"

    def test_fechas_imposibles_se_ignoran(self):
        pages = [_page(1, "Ref 45/99/2024\n10/04/2024 Closing")]

        detected = detect_periods(pages)

        assert detected[0].month == 3
        assert detected[0].last_date == "10/04/2024"

    def test_paginas_sin_fechas_no_aportan(self):
        pages = [_page(1, "Terms and conditions"), _page(2, ""), _page(3, "01.06.2024")]

        detected = detect_periods(pages)

        assert detected == [DetectedPeriod(month=5, year=2024, page=3, last_date="01.06.2024")]

    def test_sin_paginas(self):
        assert detect_periods([]) == []


class TestExtractSelection:
    def test_primer_monto_y_fecha_cercana(self):
        selection = extract_selection("Balance $1,250.50 as of 31/01/2024", page=2, x=10, y=20)

        assert selection.value == Decimal("1250.50")
        assert selection.date == "31/01/2024"
        assert selection.page == 2
        assert (selection.x, selection.y) == (10, 20)

    def test_sin_fecha_usa_la_de_defecto(self):
        selection = extract_selection("KES 9,999.00", 1, 0, 0, default_date="31/03/2024")

        assert selection.value == Decimal("9999.00")
        assert selection.date == "31/03/2024"

    def test_sin_monto_devuelve_none(self):
        assert extract_selection("Closing balance", 1, 0, 0) is None

    def test_texto_vacio(self):
        assert extract_selection("", 1, 0, 0) is None


class TestSelectAtPosition:
    def _words(self):
        return [
            WordInfo(text="Closing", x0=100, x1=140, top=300, bottom=310),
            WordInfo(text="balance", x0=145, x1=185, top=300, bottom=310),
            WordInfo(text="2,000.00", x0=190, x1=230, top=300, bottom=310),
            WordInfo(text="Footer", x0=100, x1=130, top=700, bottom=710),
        ]

    def test_arma_texto_con_palabras_cercanas(self):
        page = _page(1, "Closing balance 2,000.00", self._words())

        selection = select_at_position(page, x=165, y=305, default_date="31/05/2024")

        assert selection.value == Decimal("2000.00")
        assert selection.text == "Closing balance 2,000.00"
        assert selection.date == "31/05/2024"

    def test_pagina_sin_palabras(self):
        assert select_at_position(_page(1, "texto OCR"), x=0, y=0) is None

    def test_ninguna_palabra_cerca(self):
        page = _page(1, "Closing balance 2,000.00", self._words())
        assert select_at_position(page, x=500, y=500) is None
