import math

import pytest

from baht_planner.calculations import (
    BASIC_LIQUIDITY_EVEN,
    BASIC_LIQUIDITY_LOW,
    BASIC_LIQUIDITY_OK,
    LIQUIDITY_OK,
    LIQUIDITY_RISK,
    SURVIVAL_OK,
    SURVIVAL_RISK,
    FixedInterestResult,
    PlanError,
    RetirementPlan,
    SavingsPlan,
    TaxResult,
    basic_liquidity_advice,
    basic_liquidity_ratio,
    dca_schedule,
    fixed_interest,
    income_tax,
    liquidity_advice,
    liquidity_ratio,
    loan_payment,
    retirement_plan,
    savings_plan,
    survival_advice,
    survival_ratio,
)


# Retirement ---------------------------------------------------------------

def test_retirement_years_and_consistency():
    plan = retirement_plan(30, 60, 80, 10000)
    assert isinstance(plan, RetirementPlan)
    assert plan.years_to_retirement == 60 - 30
    assert plan.years_after_retirement == 80 - 60
    assert plan.total_savings_needed == pytest.approx(10000 * 12 * (80 - 60))
    assert plan.monthly_savings * 12 * (60 - 30) == pytest.approx(
        plan.total_savings_needed
    )


@pytest.mark.parametrize(
    "args, message",
    [
        ((60, 60, 80, 1000), "Retirement age"),
        ((30, 60, 60, 1000), "Lifespan"),
        ((30, 60, 80, 0), "Monthly expenses"),
        ((30, 60, 80, -5), "Monthly expenses"),
    ],
)
def test_retirement_rejects_bad_input(args, message):
    with pytest.raises(PlanError, match=message):
        retirement_plan(*args)


# Loans ----------------------------------------------------------------------

def test_loan_payment_amortises_balance_to_zero():
    amount, rate, years = 500000, 6, 5
    payment = loan_payment(amount, rate, years)
    monthly_rate = rate / 100 / 12
    balance = float(amount)
    for _ in range(years * 2):
        balance = balance * (1 + monthly_rate) - payment
    assert balance == pytest.approx(0, abs=1e-6)


def test_loan_payment_grows_with_rate():
    assert loan_payment(100000, 8, 3) > loan_payment(100000, 4, 3)


def test_loan_payment_rejects_zero_rate_and_term():
    with pytest.raises(PlanError):
        loan_payment(100000, 0, 3)
    with pytest.raises(PlanError):
        loan_payment(100000, 5, 0)


# DCA ------------------------------------------------------------------------

def test_dca_schedule_starts_with_principal_and_has_each_year():
    schedule = dca_schedule(1000, 100, 5, 3)
    assert [year for year, _ in schedule] == [0, 1, 2, 3]
    assert schedule[0] == (0, 1000.0)


def test_dca_zero_rate_is_linear():
    schedule = dca_schedule(1000, 100, 0, 4)
    for year, value in schedule:
        assert value == pytest.approx(1000 + 100 * 12 * year)


def test_dca_no_saving_compounds_monthly():
    schedule = dca_schedule(2000, 0, 12, 2)
    for year, value in schedule:
        assert value == pytest.approx(2000 * (1.01 ** (12 * year)))


def test_dca_no_years_keeps_principal_only():
    assert dca_schedule(500, 50, 3, 0) == [(0, 500.0)]


# Savings goal ---------------------------------------------------------------

def test_savings_plan_consistency():
    plan = savings_plan("car", 20000, 320000, 5)
    assert isinstance(plan, SavingsPlan)
    assert plan.goal == "car"
    assert plan.amount_to_save == pytest.approx(320000 - 20000)
    assert plan.yearly_saving * 5 == pytest.approx(plan.amount_to_save)
    assert plan.monthly_saving * 12 == pytest.approx(plan.yearly_saving)


@pytest.mark.parametrize(
    "current, target, years",
    [(-1, 100, 1), (100, 100, 1), (100, 50, 1), (0, 100, 0), (0, 100, -2)],
)
def test_savings_plan_rejects_bad_input(current, target, years):
    with pytest.raises(PlanError):
        savings_plan("house", current, target, years)


# Fixed interest -------------------------------------------------------------

def test_fixed_interest_payments_cover_principal_and_interest():
    result = fixed_interest(120000, 0.05, 24)
    assert isinstance(result, FixedInterestResult)
    assert result.total_interest == pytest.approx(120000 * 0.05 * 2)
    assert result.payment_per_month * 24 == pytest.approx(
        120000 + result.total_interest
    )
    assert result.monthly_principal * 24 == pytest.approx(120000)


def test_fixed_interest_counts_whole_years_only():
    short = fixed_interest(60000, 0.1, 11)
    assert short.total_interest == 0
    assert short.payment_per_month == pytest.approx(60000 / 11)
    assert fixed_interest(60000, 0.1, 23).total_interest == pytest.approx(
        fixed_interest(60000, 0.1, 12).total_interest
    )


def test_fixed_interest_rejects_no_months():
    with pytest.raises(PlanError):
        fixed_interest(1000, 0.1, 0)


# Ratios ---------------------------------------------------------------------

def test_survival_ratio_truncates():
    assert survival_ratio(30000, 20000) == 1
    assert survival_ratio(5, 10) == 0


def test_survival_advice():
    assert survival_advice(30000, 10000) == SURVIVAL_OK
    assert survival_advice(30000, 20000) == SURVIVAL_RISK
    with pytest.raises(PlanError):
        survival_advice(100, 0)


def test_liquidity_advice():
    assert liquidity_ratio(5, 3) == 1
    assert liquidity_advice(5, 3) == LIQUIDITY_OK
    assert liquidity_advice(2, 3) == LIQUIDITY_RISK
    with pytest.raises(PlanError):
        liquidity_ratio(5, 0)


def test_basic_liquidity():
    assert basic_liquidity_ratio(9000, 3000) == pytest.approx(9000 / 3000)
    assert basic_liquidity_advice(10000, 3000) == BASIC_LIQUIDITY_OK
    assert basic_liquidity_advice(8000, 3000) == BASIC_LIQUIDITY_LOW
    assert basic_liquidity_advice(9000, 3000) == BASIC_LIQUIDITY_EVEN
    with pytest.raises(PlanError):
        basic_liquidity_ratio(1000, 0)


# Tax ------------------------------------------------------------------------

def test_income_tax_deductions():
    result = income_tax(50000, 20000, 1)
    assert isinstance(result, TaxResult)
    assert result.net_income == pytest.approx(50000 * 12 - 20000)
    assert result.taxable_income == pytest.approx(result.net_income - 60000 - 30000)


@pytest.mark.parametrize(
    "monthly, payment, parents, expected",
    [
        (430000, 100000, 0, 1265000),
        (180000, 100000, 0, 365000),
        (100000, 80000, 2, 115000),
    ],
)
def test_income_tax_bracket_bases(monthly, payment, parents, expected):
    assert income_tax(monthly, payment, parents).tax == pytest.approx(expected)


def test_income_tax_free_at_threshold():
    result = income_tax(17500, 0, 0)
    assert result.taxable_income == pytest.approx(150000)
    assert result.tax == 0


def test_income_tax_rejects_bad_input():
    with pytest.raises(PlanError):
        income_tax(50000, 100001, 0)
    with pytest.raises(PlanError):
        income_tax(50000, 0, 3)
    with pytest.raises(PlanError):
        income_tax(50000, 0, -1)