"""Vehicles configured through functional options."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Callable

log = logging.getLogger(__name__)


class VehicleError(ValueError):
    """Base error for invalid vehicle options."""


class ColorNotAvailableError(VehicleError):
    """The requested color is not offered."""


class ModelNotAvailableError(VehicleError):
    """The requested model is not offered."""


class VehicleTypeNotFoundError(VehicleError):
    """The requested vehicle type does not exist."""


class InvalidAccessoryPriceError(VehicleError):
    """An accessory price is not positive."""


class NoAccessoryDescriptionError(VehicleError):
    """An accessory has no description."""


class VehicleType(IntEnum):
    CAR = 0
    MINIVAN = 1
    TRUCK = 2
    CROSSOVER = 3
    SUV = 4
    ELECTRIFIED = 5

    def __str__(self) -> str:
        if self in (VehicleType.CAR, VehicleType.MINIVAN):
            return "Car or Minivan"
        if self is VehicleType.TRUCK:
            return "Truck"
        if self in (VehicleType.CROSSOVER, VehicleType.SUV):
            return "Crossover or SUV"
        return "Electrified"


class VehicleColor(IntEnum):
    BLACK = 0
    MAGNETIC_GRAY_METALLIC = 1
    OXYGEN_WHITE = 2
    HEAVY_METAL = 3
    SUPERSONIC_RED = 4

    def __str__(self) -> str:
        return _COLOR_NAMES[self]


_COLOR_NAMES = {
    VehicleColor.BLACK: "Black",
    VehicleColor.MAGNETIC_GRAY_METALLIC: "Magnetic Gray Metallic",
    VehicleColor.OXYGEN_WHITE: "Oxygen White",
    VehicleColor.HEAVY_METAL: "Heavy Metal",
    VehicleColor.SUPERSONIC_RED: "Supersonic Red",
}

_COLOR_ALIASES = {
    "black": VehicleColor.BLACK,
    "magnetic gray metallic": VehicleColor.MAGNETIC_GRAY_METALLIC,
    "gray metallic": VehicleColor.MAGNETIC_GRAY_METALLIC,
    "gray": VehicleColor.MAGNETIC_GRAY_METALLIC,
    "oxygen white": VehicleColor.OXYGEN_WHITE,
    "white": VehicleColor.OXYGEN_WHITE,
    "heavy metal": VehicleColor.HEAVY_METAL,
    "metal": VehicleColor.HEAVY_METAL,
    "supersonic red": VehicleColor.SUPERSONIC_RED,
    "red": VehicleColor.SUPERSONIC_RED,
}


class VehicleModel(str, Enum):
    # car & minivan
    XLE = "XLE"
    LIMITED = "Limited"
    PLATINUM = "Platinum"
    # truck
    SR = "SR"
    TRD_PRE_RUNNER = "TRD PreRunner"
    TRD_OFF_ROAD = "TRD Off-Road"
    # crossover & SUV
    LE = "LE"
    HYBRID_LE = "Hybrid LE"
    XLW = "XLE"
    HYBRID_PLATINUM = "Hybrid Platinum"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AccessoryDetails:
    description: str
    price: float


@dataclass
class VehicleOptions:
    type: VehicleType = VehicleType.CAR
    model: VehicleModel = VehicleModel.XLE
    color: VehicleColor = VehicleColor.BLACK
    accessories: dict[str, AccessoryDetails] = field(default_factory=dict)


@dataclass
class Vehicle(VehicleOptions):
    """A vehicle with customised options."""


Option = Callable[[VehicleOptions], None]


def color_from_name(name: str) -> VehicleColor:
    """Return the color with the given name or alias, case-insensitively."""
    try:
        return _COLOR_ALIASES[name.lower()]
    except KeyError:
        raise ColorNotAvailableError("color not available") from None


def vehicle_type(kind: VehicleType | int) -> Option:
    """Option that sets the vehicle type."""

    def apply(options: VehicleOptions) -> None:
        try:
            options.type = VehicleType(kind)
        except ValueError:
            raise VehicleTypeNotFoundError("vehicle type not found") from None

    return apply


def model(name: VehicleModel | str) -> Option:
    """Option that sets the vehicle model."""

    def apply(options: VehicleOptions) -> None:
        try:
            options.model = VehicleModel(name)
        except ValueError:
            raise ModelNotAvailableError(f"model not available: {name}") from None

    return apply


def color(name: str) -> Option:
    """Option that sets the vehicle color by name."""

    def apply(options: VehicleOptions) -> None:
        try:
            options.color = color_from_name(name)
        except ColorNotAvailableError as exc:
            raise ColorNotAvailableError(f"{exc}: {name}") from None

    return apply


def accessory(name: str, price: float, description: str) -> Option:
    """Option that adds an accessory with a positive price and a description."""

    def apply(options: VehicleOptions) -> None:
        if price <= 0:
            raise InvalidAccessoryPriceError(
                f"accessory price must be positive: {price:g}"
            )
        if not description:
            raise NoAccessoryDescriptionError(f"{name}: empty description")
        options.accessories[name] = AccessoryDetails(description, price)

    return apply


def new_vehicle(*args: Option) -> Vehicle:
    """Build a vehicle from defaults and options; invalid options are logged and skipped."""
    vehicle = Vehicle()
    for option in args:
        try:
            option(vehicle)
        except VehicleError as exc:
            log.warning("%s", exc)
    return vehicle


def main(argv: list[str] | None = None) -> int:
    """Build and print a sample vehicle."""
    vehicle = new_vehicle(
        vehicle_type(VehicleType.SUV),
        model("XLE"),
        color("gray"),
        accessory("Ball Mount", 20.0, "Cold-forged steel construction."),
        accessory("Cargo Cover", 179.0, "Retractable cargo cover."),
    )
    print(vehicle)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())