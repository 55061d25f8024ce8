"""Interactive menu for the personal finance calculators."""

from __future__ import annotations

import argparse
import sys
from typing import Callable

from baht_planner.calculations import (
    MAX_DEDUCTIBLE_PAYMENT,
    MAX_PARENTS,
    PlanError,
    RetirementPlan,
    SavingsPlan,
    basic_liquidity_advice,
    dca_schedule,
    fixed_interest,
    income_tax,
    liquidity_advice,
    loan_payment,
    retirement_plan,
    savings_plan,
    survival_advice,
)

Reader = Callable[[], str]
Writer = Callable[[str], None]

RULE = "-" * 57
DOUBLE_RULE = "=" * 43
SINGLE_RULE = "-" * 43

MENU = (
    "--------------------------------\n"
    "             MENU               \n"
    "--------------------------------\n"
    "1: financial planning for retirement \n"
    "2: Home and car payment planning \n"
    "3: Dollar-Cost Averaging (DCA) investment calculator  \n"
    "4: Goal savings planning \n"
    "5: interest debt management \n"
    "6: Survival ratio calculation \n"
    "7: Liquidity ratio calculation \n"
    "8: Basic liquidity ratio calculation \n"
    "9: Tax calculation \n"
    "Enter choice number: "
)


def _heading(title: str, rule: str) -> str:
    return f"{rule}\n{title}\n{rule}\n"


def format_retirement_plan(plan: RetirementPlan) -> str:
    """Table summarising a retirement plan."""
    lines = [
        "",
        "Retirement Savings Plan",
        RULE,
        f"{'Years until retirement:':<30}{plan.years_to_retirement:>15}",
        f"{'Years after retirement:':<30}{plan.years_after_retirement:>15}",
        f"{'Total savings needed:':<30}{plan.total_savings_needed:>15.2f} Baht",
        f"{'Monthly savings required:':<30}{plan.monthly_savings:>15.2f} Baht",
        RULE,
    ]
    return "\n".join(lines) + "\n"


def format_savings_plan(plan: SavingsPlan) -> str:
    """Table summarising a goal savings plan."""
    lines = [
        "",
        "Savings Plan Summary",
        RULE,
        f"{'Savings Goal:':<25}{plan.goal:>15}",
        f"{'Total Amount to Save:':<25}{plan.amount_to_save:>15.2f} Baht",
        f"{'Yearly Savings Required:':<25}{plan.yearly_saving:>15.2f} Baht",
        f"{'Monthly Savings Required:':<25}{plan.monthly_saving:>15.2f} Baht",
        RULE,
    ]
    return "\n".join(lines) + "\n"


def format_dca_schedule(schedule) -> str:
    """Year-by-year table of a DCA schedule followed by the final value."""
    schedule = list(schedule)
    final_year, final_value = schedule[-1]
    lines = [DOUBLE_RULE, "Year\t\tFuture Value", SINGLE_RULE]
    lines.extend(f"{year}\t\t{value:.2f}" for year, value in schedule if year > 0)
    lines.append(SINGLE_RULE)
    lines.append(f"Final value after {final_year} years: {final_value:.2f} Bath")
    lines.append(DOUBLE_RULE)
    return "\n".join(lines) + "\n"


def _ask(read: Reader, write: Writer, prompt: str, convert, check=None,
         error: str = "Invalid input. Please enter a number.\n"):
    """Prompt until the answer converts and passes the check."""
    while True:
        write(prompt)
        text = read().strip()
        try:
            value = convert(text)
        except ValueError:
            write(error)
            continue
        if check is not None and not check(value):
            write(error)
            continue
        return value


def ask_again(read: Reader, write: Writer) -> bool:
    """Ask whether to run the program again; repeat until Y or N is given."""
    while True:
        write("Do you want to run program again? (Y/n): ")
        answer = read().strip()[:1]
        if answer in ("y", "Y"):
            return True
        if answer in ("n", "N"):
            return False
        write("Invalid input. Please enter 'Y' or 'N'.\n")


def _retirement(read: Reader, write: Writer) -> None:
    write(_heading("financial planning for retirement", "-" * 31))
    current = _ask(read, write, "Please enter your current age: ", int)
    retire = _ask(read, write, "Please enter your desired retirement age: ", int)
    lifespan = _ask(read, write, "Please enter your expected lifespan: ", int)
    expense = _ask(
        read, write,
        "Please enter your estimated monthly expenses after retirement (Baht): ",
        float,
    )
    try:
        plan = retirement_plan(current, retire, lifespan, expense)
    except PlanError as exc:
        write(f"{exc}\n")
        return
    write(format_retirement_plan(plan))


def _home_and_car(read: Reader, write: Writer) -> None:
    write(_heading("Home and car payment planning ", "-" * 31))
    amount = _ask(read, write, "Please enter the loan amount : ", float)
    rate = _ask(read, write, "Please enter the annual interest rate : ", float)
    years = _ask(read, write, "Please enter the repayment period (years) : ", int)
    try:
        payment = loan_payment(amount, rate, years)
    except PlanError as exc:
        write(f"{exc}\n")
        return
    write(f"Monthly installment amount : {int(payment)} Bath\n")
    write("End Program Thank you\n")


def _dca(read: Reader, write: Writer) -> None:
    write(_heading("Dollar-Cost Averaging (DCA) investment calculator", "-" * 31))
    write(DOUBLE_RULE + "\n")
    principal = _ask(read, write, "Enter initial principal amount: ", float)
    saving = _ask(read, write, "Enter monthly saving amount: ", float)
    rate = _ask(read, write, "Enter annual interest rate (%): ", float)
    years = _ask(read, write, "Enter number of years: ", int)
    write(format_dca_schedule(dca_schedule(principal, saving, rate, years)))


def _savings(read: Reader, write: Writer) -> None:
    write(_heading("Goal savings planning", "-" * 34))
    write("Enter your savings goal (e.g., buying a car, buying a house): ")
    goal = read().strip()
    current = _ask(
        read, write, "Enter your current savings (Baht): ", float,
        check=lambda value: value >= 0,
    )
    target = _ask(
        read, write, "Enter your target savings (Baht): ", float,
        check=lambda value: value > current,
        error="Invalid input. Target savings must be greater than current savings.\n",
    )
    years = _ask(
        read, write, "Enter the number of years you plan to save: ", float,
        check=lambda value: value > 0,
        error="Invalid input. Please enter a positive number for years.\n",
    )
    write(format_savings_plan(savings_plan(goal, current, target, years)))


def _interest_debt(read: Reader, write: Writer) -> None:
    write(_heading("interest debt management", "-" * 25))
    principal = _ask(read, write, "Please enter the principal amount : ", int)
    rate = _ask(read, write, "Please enter the annual interest rate : ", float)
    months = _ask(
        read, write,
        "Please enter the number of payment installments (months) : ", int,
    )
    try:
        result = fixed_interest(principal, rate, months)
    except PlanError as exc:
        write(f"{exc}\n")
        return
    write(f"Minimum payment per month : {result.monthly_principal:.2f}\n")
    write(f"Total interest : {result.total_interest:.2f}\n")
    write(f"Total payment amount : {result.payment_per_month:.2f}\n")


def _survival(read: Reader, write: Writer) -> None:
    write("\n" + _heading("Survival ratio calculation", "-" * 35))
    income = _ask(read, write, "Please enter your monthly income : ", int)
    expenses = _ask(read, write, "Please enter your monthly expenses : ", int)
    try:
        write(survival_advice(income, expenses) + "\n")
    except PlanError as exc:
        write(f"{exc}\n")
        return
    write("---------------\n")
    write("Thank you for using our service\n")


def _liquidity(read: Reader, write: Writer) -> None:
    write("\n" + _heading("Liquidity ratio calculation ", "-" * 30))
    assets = _ask(read, write, "Liquid assets: ", int)
    debt = _ask(read, write, "Short term debt: ", int)
    try:
        write(liquidity_advice(assets, debt) + "\n")
    except PlanError as exc:
        write(f"{exc}\n")


def _basic_liquidity(read: Reader, write: Writer) -> None:
    write("\n" + _heading("Basic liquidity ratio calculation ", "-" * 30))
    balance = _ask(read, write, "Please Enter your balacne : ", float)
    spending = _ask(read, write, "Enter You spent per mouth :", float)
    try:
        write(basic_liquidity_advice(balance, spending) + "\n")
    except PlanError as exc:
        write(f"{exc}\n")


def _tax(read: Reader, write: Writer) -> None:
    write("\n" + _heading("Tax calculation", "-" * 22))
    income = _ask(read, write, "input income per mouth : ", float)
    payment = _ask(
        read, write, "Payment per mouth (can't over 100k) : ", float,
        check=lambda value: value <= MAX_DEDUCTIBLE_PAYMENT, error="",
    )
    parents = _ask(
        read, write, "How many parent you adopt (0-2) : ", float,
        check=lambda value: 0 <= value <= MAX_PARENTS, error="",
    )
    result = income_tax(income, payment, parents)
    if result.taxable_income < 150_000:
        write("Your so broke  ")
    write(f"{result.net_income:.2f}\n")
    write(f"{result.taxable_income:.2f}\n")
    write(f"{result.tax:.2f}\n")


_ACTIONS = {
    1: _retirement,
    2: _home_and_car,
    3: _dca,
    4: _savings,
    5: _interest_debt,
    6: _survival,
    7: _liquidity,
    8: _basic_liquidity,
    9: _tax,
}


def run_menu(read: Reader, write: Writer) -> None:
    """Show the menu, run the chosen calculator, and repeat while asked to."""
    while True:
        write(MENU)
        try:
            choice = int(read().strip())
        except ValueError:
            choice = None
        action = _ACTIONS.get(choice)
        if action is None:
            write("Error\n")
        else:
            action(read, write)
        if not ask_again(read, write):
            return


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv=None) -> int:
    """Run the interactive finance planner on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="baht-planner",
        description="Interactive personal finance planning calculators.",
    )
    parser.parse_args(argv)
    try:
        run_menu(input, _write_stdout)
    except (EOFError, KeyboardInterrupt):
        _write_stdout("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())