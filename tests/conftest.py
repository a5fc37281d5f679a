from __future__ import annotations

from itertools import count

import pytest

from pos.context import PosContext
from pos.models import ProductDraft


class FakePrinter:
    """Records what would have been sent to the network printer."""

    def __init__(self, host, port=9100, timeout=None, fail_on=None):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.fail_on = fail_on
        self.written: list[str] = []
        self.cut_called = False
        self.closed = False

    def text(self, value):
        if self.fail_on == "text":
            raise OSError("Connection refused")
        self.written.append(value)

    def cut(self):
        self.cut_called = True

    def close(self):
        self.closed = True


class PrinterFactory:
    def __init__(self, fail_on=None):
        self.fail_on = fail_on
        self.printers: list[FakePrinter] = []

    def __call__(self, host, port=9100, timeout=None):
        if self.fail_on == "connect":
            raise OSError(f"No route to host {host}")
        printer = FakePrinter(host, port=port, timeout=timeout, fail_on=self.fail_on)
        self.printers.append(printer)
        return printer


@pytest.fixture
def id_factory():
    counter = count(1)
    return lambda: f"id{next(counter):04d}"


@pytest.fixture
def printer_factory():
    return PrinterFactory()


@pytest.fixture
def context(id_factory, printer_factory):
    return PosContext(id_factory=id_factory, printer_factory=printer_factory)


@pytest.fixture
def coffee_draft():
    return ProductDraft(name="Coffee", price="5.00", category="Drinks")


@pytest.fixture
def bagel_draft():
    return ProductDraft(name="Bagel", price="3.50", category="Food")



@pytest.fixture
def refusing_printer_factory():
    return PrinterFactory(fail_on="text")


@pytest.fixture
def unreachable_printer_factory():
    return PrinterFactory(fail_on="connect")
