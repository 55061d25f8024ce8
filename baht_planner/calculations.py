"""Personal finance calculations: retirement, loans, savings, debt, ratios and tax."""

from __future__ import annotations

from dataclasses import dataclass

MAX_DEDUCTIBLE_PAYMENT = 100_000
MAX_PARENTS = 2
PERSONAL_ALLOWANCE = 60_000
PARENT_ALLOWANCE = 30_000
TAX_FREE_THRESHOLD = 150_000

# (lower bound, rate, tax owed at the lower bound), highest bracket first.
_TAX_BRACKETS = (
    (5_000_000, 0.35, 1_265_000),
    (2_000_000, 0.30, 365_000),
    (1_000_000, 0.25, 115_000),
    (750_000, 0.20, 65_000),
    (500_000, 0.15, 27_500),
    (300_000, 0.10, 7_500),
    (150_000, 0.05, 0),
)

SURVIVAL_OK = "Reduce new debt and increase savings."
SURVIVAL_RISK = (
    "You are at risk in terms of your lifestyle, "
    "you should carefully consider your spending."
)
LIQUIDITY_OK = "Having enough savings to pay off short-term debt."
LIQUIDITY_RISK = (
    "There is a risk in maintaining your lifestyle or becoming delinquent on debt."
)
BASIC_LIQUIDITY_OK = "You having an emergency fund for unexpected expenses."
BASIC_LIQUIDITY_LOW = (
    "You having too little money increases the chances of disrupting "
    "investments or incurring more debt."
)
BASIC_LIQUIDITY_EVEN = "Try again"


class PlanError(ValueError):
    """Raised when the figures given to a calculation are not usable."""


@dataclass(frozen=True)
class RetirementPlan:
    """How much must be put aside each month to fund retirement."""

    years_to_retirement: int
    years_after_retirement: int
    total_savings_needed: float
    monthly_savings: float


@dataclass(frozen=True)
class SavingsPlan:
    """How much must be saved each year and month to reach a goal."""

    goal: str
    amount_to_save: float
    yearly_saving: float
    monthly_saving: float


@dataclass(frozen=True)
class FixedInterestResult:
    """Repayment figures for a fixed (flat) interest debt."""

    monthly_principal: float
    total_interest: float
    payment_per_month: float


@dataclass(frozen=True)
class TaxResult:
    """Net income, taxable income and the income tax owed on it."""

    net_income: float
    taxable_income: float
    tax: float


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def retirement_plan(current_age, retirement_age, lifespan_age, monthly_expense):
    """Savings needed before retirement to cover expenses until the expected lifespan."""
    current_age = int(current_age)
    retirement_age = int(retirement_age)
    lifespan_age = int(lifespan_age)
    monthly_expense = float(monthly_expense)
    if retirement_age <= current_age:
        raise PlanError("Retirement age must be greater than current age.")
    if lifespan_age <= retirement_age:
        raise PlanError("Lifespan must be greater than retirement age.")
    if monthly_expense <= 0:
        raise PlanError("Monthly expenses must be greater than 0.")

    years_to = retirement_age - current_age
    years_after = lifespan_age - retirement_age
    total = monthly_expense * (years_after * 12)
    return RetirementPlan(
        years_to_retirement=years_to,
        years_after_retirement=years_after,
        total_savings_needed=total,
        monthly_savings=total / (years_to * 12),
    )


def loan_payment(amount, annual_rate, years):
    """Installment for an amortised home or car loan.

    The rate is a yearly percentage; the number of installments is twice the
    number of years.
    """
    years = int(years)
    monthly_rate = float(annual_rate) / 100 / 12
    if monthly_rate == 0:
        raise PlanError("Annual interest rate must not be zero.")
    if years <= 0:
        raise PlanError("Repayment period must be a positive number of years.")
    periods = years * 2
    growth = (1 + monthly_rate) ** periods
    return float(amount) * monthly_rate * growth / (growth - 1)


def dca_schedule(principal, monthly_saving, annual_rate, years):
    """Value of a monthly investment plan at the end of each year.

    Returns (year, value) pairs starting with (0, principal).
    """
    monthly_rate = float(annual_rate) / 100 / 12
    monthly_saving = float(monthly_saving)
    value = float(principal)
    schedule = [(0, value)]
    for year in range(1, int(years) + 1):
        for _ in range(12):
            value = value * (1 + monthly_rate) + monthly_saving
        schedule.append((year, value))
    return schedule


def savings_plan(goal, current_savings, target_savings, years):
    """Yearly and monthly saving needed to go from current to target savings."""
    current_savings = float(current_savings)
    target_savings = float(target_savings)
    years = float(years)
    if current_savings < 0:
        raise PlanError("Current savings must not be negative.")
    if target_savings <= current_savings:
        raise PlanError("Target savings must be greater than current savings.")
    if years <= 0:
        raise PlanError("Please enter a positive number for years.")

    amount = target_savings - current_savings
    yearly = amount / years
    return SavingsPlan(
        goal=str(goal),
        amount_to_save=amount,
        yearly_saving=yearly,
        monthly_saving=yearly / 12,
    )


def fixed_interest(principal, annual_rate, months):
    """Flat-rate debt repayment.

    Interest is charged on the full principal for each whole year of the term;
    the rate is applied as given, not as a percentage.
    """
    principal = int(principal)
    months = int(months)
    if months <= 0:
        raise PlanError("Number of installments must be positive.")
    total = principal * float(annual_rate) * _trunc_div(months, 12)
    payment = (principal + total) / months
    monthly_interest = total / months
    return FixedInterestResult(
        monthly_principal=payment - monthly_interest,
        total_interest=total,
        payment_per_month=payment,
    )


def survival_ratio(income, expenses):
    """Whole-number ratio of monthly income to monthly expenses."""
    expenses = int(expenses)
    if expenses == 0:
        raise PlanError("Monthly expenses must not be zero.")
    return _trunc_div(int(income), expenses)


def survival_advice(income, expenses):
    """Advice based on the survival ratio."""
    return SURVIVAL_OK if survival_ratio(income, expenses) > 1 else SURVIVAL_RISK


def liquidity_ratio(liquid_assets, short_term_debt):
    """Whole-number ratio of liquid assets to short-term debt."""
    short_term_debt = int(short_term_debt)
    if short_term_debt == 0:
        raise PlanError("Short term debt must not be zero.")
    return _trunc_div(int(liquid_assets), short_term_debt)


def liquidity_advice(liquid_assets, short_term_debt):
    """Advice based on the liquidity ratio."""
    if liquidity_ratio(liquid_assets, short_term_debt) >= 1:
        return LIQUIDITY_OK
    return LIQUIDITY_RISK


def basic_liquidity_ratio(balance, monthly_spending):
    """How many months of spending the balance covers."""
    monthly_spending = float(monthly_spending)
    if monthly_spending == 0:
        raise PlanError("Monthly spending must not be zero.")
    return float(balance) / monthly_spending


def basic_liquidity_advice(balance, monthly_spending):
    """Advice based on the basic liquidity ratio."""
    ratio = basic_liquidity_ratio(balance, monthly_spending)
    if ratio > 3:
        return BASIC_LIQUIDITY_OK
    if ratio < 3:
        return BASIC_LIQUIDITY_LOW
    return BASIC_LIQUIDITY_EVEN


def income_tax(monthly_income, payment, parents):
    """Progressive personal income tax on a year of income.

    Deducts the payment, a personal allowance and an allowance per adopted
    parent; no tax is due at or below the tax-free threshold.
    """
    payment = float(payment)
    if payment > MAX_DEDUCTIBLE_PAYMENT:
        raise PlanError(f"Payment must not exceed {MAX_DEDUCTIBLE_PAYMENT}.")
    if not 0 <= parents <= MAX_PARENTS:
        raise PlanError(f"Number of parents must be between 0 and {MAX_PARENTS}.")

    net_income = float(monthly_income) * 12 - payment
    taxable = net_income - PERSONAL_ALLOWANCE - PARENT_ALLOWANCE * parents
    tax = 0.0
    for lower, rate, base in _TAX_BRACKETS:
        if taxable > lower:
            tax = (taxable - lower) * rate + base
            break
    return TaxResult(net_income=net_income, taxable_income=taxable, tax=tax)