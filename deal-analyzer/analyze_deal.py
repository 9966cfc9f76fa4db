"""CLI client for the Deal Metrics API: posts a deal and prints a terminal report.

Usage:
    python deal-analyzer/analyze_deal.py deal.json
    python deal-analyzer/analyze_deal.py deal.json --price 950000 --cash
    python deal-analyzer/analyze_deal.py deal.json --api-url http://localhost:8000 --years 10

The deal file holds the /api/v1/analyze payload:
    {"property": {...}, "unit_mix": [...], "income": [...], "expenses": [...]}
"""

import argparse
import asyncio
import json
import sys
from decimal import Decimal

import httpx


# ── Helpers ──────────────────────────────────────────────────────────────────

def _pct(v) -> str:
    """Format a decimal ratio as a percentage string."""
    if v is None:
        return "n/a"
    return f"{float(v) * 100:.2f}%"


def _dollar(v) -> str:
    return f"${float(v):,.0f}"


def _ratio(v) -> str:
    return "∞" if v is None else f"{float(v):.2f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_key_metrics(data: dict) -> None:
    s = data["scenarios"]
    cur, mkt, up = (s[k]["key_metrics"] for k in ("current", "market", "upside"))
    _header("Key Metrics")
    print(f"  {'':<22} {'Current':>12} {'Market':>12} {'Upside':>12}")
    print(f"  {'Cap Rate':<22} {_pct(cur['cap_rate']):>12} {_pct(mkt['cap_rate']):>12} {_pct(up['cap_rate']):>12}")
    print(
        f"  {'Cash-on-Cash':<22} {_pct(cur['cash_on_cash_return']):>12} "
        f"{_pct(mkt['cash_on_cash_return']):>12} {_pct(up['cash_on_cash_return']):>12}"
    )
    print(
        f"  {'Annual NOI':<22} {_dollar(cur['net_operating_income']):>12} "
        f"{_dollar(mkt['net_operating_income']):>12} {_dollar(up['net_operating_income']):>12}"
    )
    print(
        f"  {'Annual Cash Flow':<22} {_dollar(cur['annual_cash_flow']):>12} "
        f"{_dollar(mkt['annual_cash_flow']):>12} {_dollar(up['annual_cash_flow']):>12}"
    )
    print(
        f"  {'GRM':<22} {_ratio(cur['gross_rent_multiplier']):>12} "
        f"{_ratio(mkt['gross_rent_multiplier']):>12}"
    )
    print(
        f"  {'DSCR':<22} {_ratio(cur['debt_service_coverage_ratio']):>12} "
        f"{_ratio(mkt['debt_service_coverage_ratio']):>12}"
    )
    print(f"  Total Investment:      {_dollar(cur['total_investment'])}")


def print_monthly_pl(data: dict) -> None:
    _header("Monthly P&L")
    cur = data["scenarios"]["current"]["monthly_breakdown"]
    mkt = data["scenarios"]["market"]["monthly_breakdown"]
    rows = [
        ("Gross Income", "gross_income"),
        ("Operating Expenses", "total_expenses"),
        ("NOI", "net_operating_income"),
        ("Mortgage Payment", "mortgage_payment"),
        ("Cash Flow", "cash_flow"),
    ]
    print(f"  {'':<22} {'Current':>12} {'Market':>12}")
    for label, key in rows:
        print(f"  {label:<22} {_dollar(cur[key]):>12} {_dollar(mkt[key]):>12}")


def print_expense_breakdown(data: dict) -> None:
    items = data.get("expense_breakdown", [])
    if not items:
        return
    _header("Expense Breakdown (monthly)")
    for item in items:
        print(
            f"  {item['name']:<26} {_dollar(item['current_amount']):>12} "
            f"{_dollar(item['market_amount']):>12}"
        )


def print_market_upside(data: dict) -> None:
    ma = data["market_analysis"]
    _header("Market Rent Upside")
    print(f"  Current Gross Income:  {_dollar(ma['current_gross_income'])}/mo")
    print(f"  Market Gross Income:   {_dollar(ma['market_gross_income'])}/mo")
    print(f"  Potential Increase:    {_dollar(ma['potential_increase'])}/mo ({_pct(ma['upside_pct'])})")
    for gap in ma.get("unit_gaps", []):
        print(
            f"    {gap['unit_type']:<16} x{gap['count']:<4} "
            f"{_dollar(gap['current_rent']):>8} -> {_dollar(gap['market_rent']):>8}  "
            f"({_pct(gap['gap_pct'])})"
        )


def print_financing(data: dict) -> None:
    f = data["financing"]
    _header("Financing")
    if Decimal(str(f["loan_amount"])) == 0:
        print("  Cash purchase")
        return
    print(f"  Loan Amount:           {_dollar(f['loan_amount'])} ({_pct(f['loan_to_value'])} LTV)")
    print(f"  Down Payment:          {_dollar(f['down_payment'])} ({_pct(f['down_payment_pct'])})")
    print(f"  Rate / Term:           {float(f['interest_rate']):.3f}% / {f['loan_term_years']} yrs")
    print(f"  Monthly Payment:       ${float(f['monthly_payment']):,.2f}")
    print(f"  Total Interest:        {_dollar(f['total_interest'])}")


def print_returns(data: dict) -> None:
    r = data["current_returns"]
    _header("Returns (current rents)")
    payback = float(r["payback_period_years"])
    print(f"  ROI (year 1):          {_pct(r['roi'])}")
    print(f"  Payback Period:        {f'{payback:.1f} yrs' if payback else 'n/a'}")
    print(f"  {r['years']}-Year Cash Flow:     {_dollar(r['projected_cash_flow'])}")
    print(f"  {r['years']}-Year ROI:           {_pct(r['projected_roi'])}")


# ── Main ─────────────────────────────────────────────────────────────────────

async def main() -> None:
    parser = argparse.ArgumentParser(
        description="Analyze a multifamily deal via the Deal Metrics API"
    )
    parser.add_argument("deal_file", help="JSON file with property, unit_mix, income, expenses")
    parser.add_argument("--price", type=Decimal, help="Purchase price override")
    parser.add_argument("--down-payment", type=Decimal, help="Down payment override")
    parser.add_argument("--rate", type=Decimal, help="Interest rate override, in percent")
    parser.add_argument("--term", type=int, help="Loan term override, in years")
    parser.add_argument("--cash", action="store_true", help="Treat as an all-cash purchase")
    parser.add_argument("--years", type=int, help="Return projection horizon")
    parser.add_argument(
        "--api-url",
        default="http://localhost:8000",
        help="API base URL (default: http://localhost:8000)",
    )

    args = parser.parse_args()

    try:
        with open(args.deal_file) as fh:
            payload: dict = json.load(fh)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: Could not read deal file: {e}", file=sys.stderr)
        sys.exit(1)

    prop = payload.setdefault("property", {})
    field_map = {
        "price": "purchase_price",
        "down_payment": "down_payment",
        "rate": "interest_rate",
        "term": "loan_term_years",
    }
    for cli_name, api_name in field_map.items():
        val = getattr(args, cli_name)
        if val is not None:
            prop[api_name] = val if not isinstance(val, Decimal) else str(val)
    if args.cash:
        prop["is_cash_purchase"] = True
    if args.years is not None:
        payload["projection_years"] = args.years

    url = f"{args.api_url}/api/v1/analyze"

    async with httpx.AsyncClient(timeout=30) as client:
        try:
            resp = await client.post(url, json=payload)
        except httpx.ConnectError:
            print(f"Error: Could not connect to API at {args.api_url}", file=sys.stderr)
            print(
                "Is the server running? Start with: uvicorn dealmetrics.api.app:app --reload",
                file=sys.stderr,
            )
            sys.exit(1)
        except httpx.TimeoutException:
            print("Error: Request timed out", file=sys.stderr)
            sys.exit(1)

        if resp.status_code != 200:
            print(f"Error: API returned {resp.status_code}", file=sys.stderr)
            try:
                detail = resp.json().get("detail", resp.text)
            except ValueError:
                detail = resp.text
            print(f"  {detail}", file=sys.stderr)
            sys.exit(1)

        data = resp.json()

    # Print report
    print_key_metrics(data)
    print_monthly_pl(data)
    print_expense_breakdown(data)
    print_market_upside(data)
    print_financing(data)
    print_returns(data)
    print()


if __name__ == "__main__":
    asyncio.run(main())
