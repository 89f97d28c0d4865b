"""
reset_data.py
-------------
Clear all stored data (users, bicycles, rentals) from the data file
configured by ``BIKERENTAL_DATA_PATH`` (``data.pkl`` by default).

Usage:
    $ python reset_data.py

Repopulate sample data afterwards with:
    $ python seeds.py
"""

from bikerental.config import Settings
from bikerental.models.store import Store


def main():
    settings = Settings.from_env()
    store = Store(settings.data_path)
    store.clear()
    print(f"{store.path or 'In-memory store'} has been cleared.")
    print("Tip: run `python seeds.py` to regenerate demo data.")


if __name__ == "__main__":
    main()
