# baht_planner

Small personal-finance calculators with an interactive console menu. Amounts
are shown in Baht.

## Install

    pip install .

## Interactive use

    baht-planner

The command takes no options besides `--help`. It shows a menu:

1. Financial planning for retirement
2. Home and car payment planning
3. Dollar-Cost Averaging (DCA) investment calculator
4. Goal savings planning
5. Interest debt management
6. Survival ratio calculation
7. Liquidity ratio calculation
8. Basic liquidity ratio calculation
9. Tax calculation

Any other choice prints `Error`. Answers that are not numbers are asked for
again. After each calculation you are asked whether to run the program again
(Y/n); end of input or Ctrl-C also ends the program.

## Library use

The calculations live in `baht_planner.calculations` and return plain values
or small frozen dataclasses (`RetirementPlan`, `SavingsPlan`,
`FixedInterestResult`, `TaxResult`). Figures that cannot be used raise
`PlanError`, a subclass of `ValueError`.

```python
from baht_planner.calculations import (
    retirement_plan,
    savings_plan,
    dca_schedule,
    income_tax,
    PlanError,
)

plan = retirement_plan(30, 60, 80, 20000)
print(plan.total_savings_needed, plan.monthly_savings)

goal = savings_plan("car", 10000, 130000, 2)
print(goal.monthly_saving)

# (year, value) pairs, starting with (0, principal)
for year, value in dca_schedule(1000, 500, 5, 3):
    print(year, round(value, 2))

tax = income_tax(50000, 20000, 1)
print(tax.net_income, tax.taxable_income, tax.tax)

try:
    retirement_plan(60, 50, 80, 20000)
except PlanError as exc:
    print(exc)
```

Other functions:

- `loan_payment(amount, annual_rate, years)`: the installment for an
  amortised loan. The rate is a yearly percentage and the number of
  installments is twice the number of years. A zero rate or a period that is
  not positive raises `PlanError`.
- `fixed_interest(principal, annual_rate, months)`: flat-rate debt figures.
  Interest is charged on the whole principal for each whole year of the term,
  and the rate is used as given, not as a percentage.
- `survival_ratio` / `survival_advice` and `liquidity_ratio` /
  `liquidity_advice`: whole-number ratios (rounded toward zero) and the advice
  text chosen from them.
- `basic_liquidity_ratio` / `basic_liquidity_advice`: how many months of
  spending a balance covers, and the advice for it.

`income_tax` rejects a payment over 100,000 and a number of parents outside
0 to 2.

The formatting helpers in `baht_planner.cli` (`format_retirement_plan`,
`format_savings_plan`, `format_dca_schedule`) produce the same tables the menu
prints. `ask_again` and `run_menu` take a `read` function returning one line
of input and a `write` function taking text, so the menu can be driven
without a terminal.

## Tests

    pip install .[test]
    pytest