"""
Flujo interactivo de registro.

Arma el formulario con sus validadores y repite la carga hasta que
todos los campos y todas las reglas cruzadas sean válidos.
"""

import logging
from datetime import date
from typing import Callable, Optional

from registro.config import RegistrationCatalog, default_catalog
from registro.core import (
    DestinationToFlightTimeValidator,
    DestinationToWifiBundleValidator,
    Field,
    FillResult,
    Form,
    IdValidator,
    InputReader,
    NoDigitValidator,
    RangeValidator,
    parse_enumerated,
    parse_int,
    parse_text,
    parse_unsigned,
)
from registro.cli.terminal import clear_screen
from registro.cli.theme import (
    print_error,
    print_error_banner,
    print_form,
    print_goodbye_banner,
    print_info,
    print_success,
    print_welcome_banner,
)

logger = logging.getLogger(__name__)


def current_year() -> int:
    """Año actual según el reloj del sistema."""
    return date.today().year


def build_form(catalog: RegistrationCatalog, year: int) -> Form:
    """
    Crea el formulario de registro.

    Args:
        catalog: Tablas de nombres y combinaciones permitidas
        year: Año actual, para acotar el año de nacimiento

    Returns:
        Formulario con seis campos y dos reglas cruzadas
    """
    destinations = catalog.destinations
    flight_times = catalog.flight_times
    wifi_bundles = catalog.wifi_bundles

    form = Form()
    name = form.add_field(Field("¿Cuál es tu nombre?", parse_text))
    id_number = form.add_field(Field("¿Cuál es tu número de documento?", parse_unsigned))
    birth_year = form.add_field(Field("¿En qué año naciste?", parse_int))
    destination = form.add_field(Field(
        "¿Cuál es tu destino?\n" + destinations.values_and_names(),
        parse_enumerated(destinations),
    ))
    flight_time = form.add_field(Field(
        "¿En qué horario quieres volar?\n" + flight_times.values_and_names(),
        parse_enumerated(flight_times),
    ))
    wifi_bundle = form.add_field(Field(
        "¿Qué paquete WiFi quieres?\n" + wifi_bundles.values_and_names(),
        parse_enumerated(wifi_bundles),
    ))

    name.add_validator(NoDigitValidator())
    id_number.add_validator(IdValidator())
    birth_year.add_validator(RangeValidator(year - catalog.max_age, year - catalog.min_age))
    destination.add_validator(RangeValidator(destinations.first_code, destinations.last_code))
    flight_time.add_validator(RangeValidator(flight_times.first_code, flight_times.last_code))
    wifi_bundle.add_validator(RangeValidator(wifi_bundles.first_code, wifi_bundles.last_code))

    form.add_validator(DestinationToFlightTimeValidator(destination, flight_time, catalog))
    form.add_validator(DestinationToWifiBundleValidator(destination, wifi_bundle, catalog))

    return form


def run_registration(
    reader: InputReader,
    catalog: Optional[RegistrationCatalog] = None,
    year_provider: Optional[Callable[[], int]] = None,
    clear: Optional[Callable[[], None]] = None,
) -> Optional[Form]:
    """
    Ejecuta el registro completo.

    Returns:
        Formulario aceptado, o None si el usuario canceló
    """
    year_provider = year_provider or current_year
    clear = clear or clear_screen
    form = build_form(catalog or default_catalog(), year_provider())

    clear()
    print_welcome_banner()

    attempt = 1
    while True:
        if form.fill_form(reader) == FillResult.CANCEL:
            return None
        if form.validate_form():
            break

        attempt += 1
        logger.debug("Formulario inválido, intento %d", attempt)
        clear()
        print_error_banner()
        for message in form.rule_errors:
            print_error(message)
        print_form(form)
        print_info("Vuelve a ingresar los campos marcados")

    clear()
    print_goodbye_banner()
    print_form(form)
    print_success("Registro completado")
    return form
