import sys
import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Add repo root to sys.path
sys.path.append(os.path.join(os.path.dirname(__file__), "../"))

from barbatch.models import Cocktail
from barbatch.services.abv import estimate_abv
from barbatch.settings import settings

def update_cocktail_abv(dry_run: bool = False):
    print(f"Connecting to {settings.database_url}...")
    engine = create_engine(settings.database_url)
    Session = sessionmaker(bind=engine)
    session = Session()

    try:
        cocktails = session.query(Cocktail).order_by(Cocktail.id).all()
        print(f"Found {len(cocktails)} cocktails.")

        changed = 0
        for cocktail in cocktails:
            abv = estimate_abv(cocktail.ingredients)
            if cocktail.abv != abv:
                print(f"Cocktail {cocktail.id} ('{cocktail.name}'): {cocktail.abv} -> {abv}%")
                cocktail.abv = abv
                changed += 1

        if dry_run:
            session.rollback()
            print(f"Dry run: {changed} cocktails would change.")
        else:
            session.commit()
            print(f"Updated {changed} cocktails.")

    except Exception as e:
        session.rollback()
        print(f"Error: {e}")
        raise
    finally:
        session.close()

if __name__ == "__main__":
    update_cocktail_abv(dry_run="--dry-run" in sys.argv)
