"""The Wardbook CLI and console entrypoints."""

import logging
from pathlib import Path

import click
from click_default_group import DefaultGroup

from wardbook.exceptions import WardbookError
from wardbook.hospital import Hospital
from wardbook.settings import SETTINGS, Settings
from wardbook.tui.app import WardbookApp
from wardbook.types import Bill, Outcome, Patient

DISCOUNT_RANGE = click.FloatRange(0, 100)


def _open(ctx: click.Context, discount: float | None = None) -> Hospital:
    settings: Settings = ctx.obj
    try:
        hospital = Hospital.open(settings)
    except WardbookError as e:
        raise click.ClickException(str(e)) from e
    if discount is not None:
        hospital.billing.apply_discount(discount)
    return hospital


def _save(hospital: Hospital) -> None:
    try:
        hospital.save()
    except WardbookError as e:
        raise click.ClickException(str(e)) from e


def _check(outcome: Outcome) -> None:
    if not outcome.ok:
        raise click.ClickException(outcome.message)


def _patient_line(patient: Patient, hospital: Hospital) -> str:
    days = patient.days_admitted(hospital.registry.today())
    return (
        f"ID: {patient.id} | Name: {patient.name} | Age: {patient.age} | "
        f"Ward: {patient.ward} | Status: {patient.status.value} | Days: {days}"
    )


def _echo_bill(bill: Bill) -> None:
    click.echo("BILLING STATEMENT")
    click.echo(f"Patient: {bill.patient_name} (ID: {bill.patient_id})")
    click.echo(f"Ward: {bill.ward}")
    click.echo(f"Daily Rate: {bill.daily_rate:.2f}")
    click.echo(f"Days Admitted: {bill.days_admitted}")
    click.echo(f"Total Bill: {bill.total_bill:.2f}")
    click.echo(f"Discount ({bill.discount_percentage:g}%): -{bill.discount:.2f}")
    click.echo(f"Final Bill: {bill.final_bill:.2f}")


@click.group(cls=DefaultGroup, default="tui", default_if_no_args=True)
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the patients, rates and report files.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (default: WARDBOOK_LOG_LEVEL or WARNING).",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, log_level: str | None) -> None:
    """Hospital ward beds, admissions, discharges and billing."""
    settings: Settings = ctx.obj or SETTINGS
    if data_dir is not None:
        settings = settings.model_copy(update={"data_dir": data_dir})
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = settings


@cli.command()
@click.pass_context
def tui(ctx: click.Context) -> None:
    """Launch the Wardbook console."""
    app = WardbookApp(_open(ctx))
    app.run()


@cli.command()
@click.argument("patient_id")
@click.argument("name")
@click.argument("age", type=int)
@click.argument("ward")
@click.pass_context
def admit(ctx: click.Context, patient_id: str, name: str, age: int, ward: str) -> None:
    """Admit a patient into a ward."""
    hospital = _open(ctx)
    outcome = hospital.registry.admit_patient(patient_id, name, age, ward)
    if not outcome.ok and ward not in hospital.registry.wards:
        available = ", ".join(hospital.registry.wards)
        raise click.ClickException(f"{outcome.message}. Available wards: {available}")
    _check(outcome)
    _save(hospital)
    click.echo(f"Patient {name} admitted to {ward}")


@cli.command()
@click.argument("patient_id")
@click.pass_context
def discharge(ctx: click.Context, patient_id: str) -> None:
    """Discharge a patient and release their bed."""
    hospital = _open(ctx)
    outcome = hospital.registry.discharge_patient(patient_id)
    _check(outcome)
    _save(hospital)
    click.echo(f"Patient {outcome.unwrap().name} discharged")


@cli.command()
@click.pass_context
def patients(ctx: click.Context) -> None:
    """List every patient."""
    hospital = _open(ctx)
    if not hospital.registry.patients:
        click.echo("No patients in the system")
        return
    for patient in hospital.registry.patients:
        click.echo(_patient_line(patient, hospital))


@cli.command()
@click.pass_context
def occupancy(ctx: click.Context) -> None:
    """Show bed usage per ward."""
    hospital = _open(ctx)
    for ward in hospital.registry.ward_occupancy():
        click.echo(
            f"Ward: {ward.name} | Beds: {ward.occupied_beds}/{ward.total_beds} | "
            f"Available: {ward.available_beds} | "
            f"Occupancy: {ward.occupancy_percentage:.1f}%"
        )


@cli.command()
@click.pass_context
def allocations(ctx: click.Context) -> None:
    """Show which patients hold a bed in each ward."""
    hospital = _open(ctx)
    for ward_name, occupants in hospital.registry.ward_allocations().items():
        click.echo(f"{ward_name} Ward:")
        if not occupants:
            click.echo("  (No patients)")
        for patient in occupants:
            click.echo(f"  - {patient.name} (ID: {patient.id})")


@cli.command()
@click.option("--discount", type=DISCOUNT_RANGE, default=None, help="Percent off.")
@click.pass_context
def report(ctx: click.Context, discount: float | None) -> None:
    """Print the billing report for discharged patients and save it."""
    hospital = _open(ctx, discount)
    billing_report = hospital.billing_report()
    for bill in billing_report.bills:
        click.echo(
            f"{bill.patient_name:<20} | Ward: {bill.ward:<15} | "
            f"Days: {bill.days_admitted} | Bill: {bill.final_bill:.2f}"
        )
    click.echo(f"Grand total: {billing_report.grand_total:.2f}")
    try:
        path = hospital.save_report()
    except WardbookError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Billing report saved to {path}")


@cli.command()
@click.argument("patient_id")
@click.option("--discount", type=DISCOUNT_RANGE, default=None, help="Percent off.")
@click.pass_context
def bill(ctx: click.Context, patient_id: str, discount: float | None) -> None:
    """Print the bill for one discharged patient."""
    hospital = _open(ctx, discount)
    outcome = hospital.billing.bill_for(hospital.registry, patient_id)
    _check(outcome)
    _echo_bill(outcome.unwrap())


if __name__ == "__main__":
    cli()
