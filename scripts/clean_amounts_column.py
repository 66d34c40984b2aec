"""
Split combined amount strings ("1.5 oz") into amount + unit columns.

Rows whose amount parses as a liquid get the canonical unit moved into
`unit`; count and special rows are reported and left untouched.
"""
import sys
import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Add repo root to sys.path
sys.path.append(os.path.join(os.path.dirname(__file__), "../"))

from barbatch.models import CocktailIngredient
from barbatch.parsing.amount_parser import parse_amount
from barbatch.services.unit_conversion import format_number
from barbatch.settings import settings

def clean_amounts(dry_run: bool = False):
    engine = create_engine(settings.database_url)
    Session = sessionmaker(bind=engine)
    session = Session()

    try:
        rows = session.query(CocktailIngredient).filter(CocktailIngredient.unit == None).all()
        print(f"Found {len(rows)} ingredients without a unit column.")

        updated = 0
        for row in rows:
            parsed = parse_amount(row.amount)
            if parsed.kind != "liquid":
                print(f"  skip {row.id} '{row.name}': '{row.amount}' ({parsed.kind})")
                continue

            new_amount = format_number(parsed.base_amount, 4)
            print(f"  {row.id} '{row.name}': '{row.amount}' -> '{new_amount}' {parsed.unit}")
            row.amount = new_amount
            row.unit = parsed.unit
            updated += 1

        if dry_run:
            session.rollback()
            print(f"Dry run: {updated} rows would change.")
        else:
            session.commit()
            print(f"Updated {updated} rows.")

    except Exception as e:
        session.rollback()
        print(f"Error: {e}")
        raise
    finally:
        session.close()

if __name__ == "__main__":
    clean_amounts(dry_run="--dry-run" in sys.argv)
