import sys
import os
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import sessionmaker

# Add repo root to sys.path
sys.path.append(os.path.join(os.path.dirname(__file__), "../"))

from barbatch.models import LiquorPrice
from barbatch.seed_data import LIQUOR_PRICES
from barbatch.services.price_table import invalidate_price_cache
from barbatch.settings import settings

def seed_liquor_prices():
    print("Populating liquor prices...")
    engine = create_engine(settings.database_url)
    Session = sessionmaker(bind=engine)
    session = Session()

    try:
        for item in LIQUOR_PRICES:
            row = session.execute(
                select(LiquorPrice).where(func.lower(LiquorPrice.name) == item["name"].lower())
            ).scalar_one_or_none()
            if row is None:
                row = LiquorPrice(name=item["name"])
                session.add(row)
            row.bottle_price = item["price"]
            row.bottle_size_ml = item["bottle_size_ml"]
            print(f"  {item['name']}: ${item['price']:.2f} ({item['bottle_size_ml']}ml)")

        session.commit()
        invalidate_price_cache()
        print(f"Done. {len(LIQUOR_PRICES)} liquor prices upserted.")

    except Exception as e:
        session.rollback()
        print(f"Failed: {e}")
        raise
    finally:
        session.close()

if __name__ == "__main__":
    seed_liquor_prices()
