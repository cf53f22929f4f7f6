"""
Excepciones de dominio del proyecto conciliacion-estados.

¿Por qué excepciones propias en lugar de usar ValueError/RuntimeError?
Porque permiten que el código de orquestación (StatementReconciler) pueda
distinguir entre "el PDF está corrupto" y "el saldo ya existe" y tomar
acciones diferentes para cada caso (registrar en bitácora, avisar al
usuario, reintentar con OCR).

Un periodo que no se puede parsear NO es una excepción: parse_period
devuelve None y quien llama decide. Solo parse_period_strict lanza
PeriodoInvalidoError.

Jerarquía:
    ConciliacionBaseError
    ├── PeriodoInvalidoError        → Texto de periodo no reconocido
    │   └── PeriodoFueraDeRangoError → Periodo reconocido pero con rango imposible
    ├── SaldoDuplicadoError         → Ya existe un saldo para ese mes/año
    ├── SaldoNoEncontradoError      → No existe saldo para ese mes/año
    ├── FormatoInvalidoError        → El archivo no tiene el formato esperado
    ├── ExtractionError             → Error al extraer texto del archivo
    ├── RepositoryError             → Error leyendo/escribiendo registros
    └── OutputError                 → Error al generar el reporte
"""


class ConciliacionBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta."""


class PeriodoInvalidoError(ConciliacionBaseError):
    """Se lanza cuando un texto de periodo no coincide con ningún patrón.

    Solo la lanza parse_period_strict. El flujo normal (parse_period)
    devuelve None, también cuando un patrón lanza PeriodoFueraDeRangoError.
    """

    def __init__(self, texto: str | None):
        self.texto = texto
        super().__init__(f"Periodo de estado de cuenta no reconocido: '{texto}'")


class PeriodoFueraDeRangoError(PeriodoInvalidoError):
    """Un patrón reconoció el texto, pero el rango no es válido.

    Ejemplos: "December - January 2024" (inicio posterior al fin) o
    "01/13/2024 - 31/12/2024" (mes 13). La lanzan los patrones de periodo
    y PeriodPatternRegistry la usa para terminar la búsqueda: el texto ya
    tiene dueño y otro patrón más general daría un periodo equivocado.
    """

    def __init__(self, texto: str | None, causa: str):
        self.texto = texto
        self.causa = causa
        ConciliacionBaseError.__init__(self, f"Periodo de estado de cuenta inválido: '{texto}' ({causa})")


class SaldoDuplicadoError(ConciliacionBaseError):
    """Se lanza al agregar manualmente un mes que ya tiene saldo."""

    def __init__(self, month: int, year: int):
        self.month = month
        self.year = year
        super().__init__(f"Ya existe un saldo para {year:04d}-{month + 1:02d}")


class SaldoNoEncontradoError(ConciliacionBaseError):
    """Se lanza al editar/verificar/eliminar un mes sin saldo registrado."""

    def __init__(self, month: int, year: int):
        self.month = month
        self.year = year
        super().__init__(f"No existe saldo para {year:04d}-{month + 1:02d}")


class FormatoInvalidoError(ConciliacionBaseError):
    """Se lanza cuando un archivo no tiene el formato esperado.

    Ejemplos:
    - Se esperaba un PDF pero el archivo es un .xlsx.
    - El archivo no existe.
    """

    def __init__(self, archivo: str, formato_esperado: str, detalle: str = ""):
        self.archivo = archivo
        self.formato_esperado = formato_esperado
        mensaje = f"Formato inválido en '{archivo}'. Se esperaba: {formato_esperado}"
        if detalle:
            mensaje += f" — {detalle}"
        super().__init__(mensaje)


class ExtractionError(ConciliacionBaseError):
    """Se lanza cuando falla la extracción de texto de un archivo.

    Esto puede pasar porque:
    - El PDF está protegido con contraseña y no se proporcionó.
    - pdfplumber no puede leer el archivo.
    - Tesseract no está instalado pero se intentó OCR.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error extrayendo texto de '{archivo}': {causa}")


class RepositoryError(ConciliacionBaseError):
    """Se lanza cuando el almacén de registros falla o no encuentra un registro."""

    def __init__(self, origen: str, causa: str):
        self.origen = origen
        self.causa = causa
        super().__init__(f"Error en el almacén '{origen}': {causa}")


class OutputError(ConciliacionBaseError):
    """Se lanza cuando falla la generación del reporte de salida."""

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
