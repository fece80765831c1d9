import logging

import pytest

from minibench.vehicle import (
    AccessoryDetails,
    ColorNotAvailableError,
    InvalidAccessoryPriceError,
    ModelNotAvailableError,
    NoAccessoryDescriptionError,
    Vehicle,
    VehicleColor,
    VehicleError,
    VehicleModel,
    VehicleOptions,
    VehicleType,
    VehicleTypeNotFoundError,
    accessory,
    color,
    color_from_name,
    main,
    model,
    new_vehicle,
    vehicle_type,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("black", VehicleColor.BLACK),
        ("gray", VehicleColor.MAGNETIC_GRAY_METALLIC),
        ("Gray Metallic", VehicleColor.MAGNETIC_GRAY_METALLIC),
        ("WHITE", VehicleColor.OXYGEN_WHITE),
        ("metal", VehicleColor.HEAVY_METAL),
        ("Supersonic Red", VehicleColor.SUPERSONIC_RED),
    ],
)
def test_color_from_name(name, expected):
    assert color_from_name(name) is expected


def test_unknown_color_raises():
    with pytest.raises(ColorNotAvailableError, match="color not available"):
        color_from_name("purple")


def test_color_names_round_trip():
    for c in VehicleColor:
        assert color_from_name(str(c)) is c


def test_color_and_type_strings():
    assert str(color_from_name("gray")) == "Magnetic Gray Metallic"
    assert str(new_vehicle(vehicle_type(VehicleType.SUV)).type) == "Crossover or SUV"
    assert str(new_vehicle(vehicle_type(VehicleType.MINIVAN)).type) == "Car or Minivan"
    assert str(new_vehicle(vehicle_type(VehicleType.ELECTRIFIED)).type) == "Electrified"


def test_xle_model_matches_xlw_alias():
    assert new_vehicle(model("XLE")).model is VehicleModel.XLW


def test_defaults():
    v = new_vehicle()
    assert v.type is VehicleType.CAR
    assert v.model is VehicleModel.XLE
    assert v.color is VehicleColor.BLACK
    assert v.accessories == {}


def test_sample_vehicle():
    v = new_vehicle(
        vehicle_type(VehicleType.SUV),
        model("XLE"),
        color("gray"),
        accessory("Ball Mount", 20.0, "Cold-forged steel construction."),
        accessory("Cargo Cover", 179.0, "Retractable cargo cover."),
    )
    assert isinstance(v, Vehicle)
    assert v.type is VehicleType.SUV
    assert v.color is VehicleColor.MAGNETIC_GRAY_METALLIC
    assert v.accessories["Cargo Cover"] == AccessoryDetails("Retractable cargo cover.", 179.0)
    assert list(v.accessories) == ["Ball Mount", "Cargo Cover"]


def test_invalid_option_is_logged_and_skipped(caplog):
    with caplog.at_level(logging.WARNING, logger="minibench.vehicle"):
        v = new_vehicle(color("purple"), model("Limited"))
    assert v.color is VehicleColor.BLACK
    assert v.model is VehicleModel.LIMITED
    assert any("color not available: purple" in r.getMessage() for r in caplog.records)


def test_model_option_rejects_unknown():
    with pytest.raises(ModelNotAvailableError, match="model not available: Corolla"):
        model("Corolla")(VehicleOptions())


def test_type_option_rejects_unknown():
    with pytest.raises(VehicleTypeNotFoundError, match="vehicle type not found"):
        vehicle_type(42)(VehicleOptions())


@pytest.mark.parametrize("price", [0, -5.0])
def test_accessory_requires_positive_price(price):
    options = VehicleOptions()
    with pytest.raises(InvalidAccessoryPriceError, match="accessory price must be positive"):
        accessory("Mat", price, "Floor mat.")(options)
    assert options.accessories == {}


def test_accessory_requires_description():
    with pytest.raises(NoAccessoryDescriptionError) as info:
        accessory("Mat", 10.0, "")(VehicleOptions())
    assert str(info.value).startswith("Mat:")


@pytest.mark.parametrize(
    "apply",
    [
        lambda: color_from_name("purple"),
        lambda: model("Corolla")(VehicleOptions()),
        lambda: vehicle_type(42)(VehicleOptions()),
        lambda: accessory("Mat", 0, "Floor mat.")(VehicleOptions()),
        lambda: accessory("Mat", 10.0, "")(VehicleOptions()),
    ],
)
def test_errors_share_base(apply):
    with pytest.raises(VehicleError):
        apply()


def test_main_prints_vehicle(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Ball Mount" in out
    assert "Retractable cargo cover." in out