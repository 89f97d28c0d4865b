from bikerental.config import Settings
from bikerental.models.store import Store
from bikerental.services import build_services
from bikerental.utils.logging_config import setup_logging

DEMO_BICYCLES = ["road", "mountain", "city", "tandem"]


def main():
    settings = Settings.from_env()
    setup_logging(settings.log_level, settings.log_file)
    store = Store(settings.data_path)
    svc = build_services(store)

    # ---- Demo user (create only if no users exist) ----
    if not len(store.users):
        user = svc.users.create_user({
            "userName": "Alice", "userAddress": "1 Main St", "userAge": "30",
        }).unwrap()
        print(f"Demo user:  {user.user_name} ({user.user_id})")

    # ---- Demo bicycles (create only if none exist) ----
    if not len(store.bicycles):
        for kind in DEMO_BICYCLES:
            svc.fleet.add_bicycle({"type": kind, "isAvailable": True, "renterId": ""}).unwrap()

    print("Seed complete.")
    print(f"Users: {len(store.users)}, bicycles: {len(store.bicycles)}, rentals: {len(store.renters)}")


if __name__ == "__main__":
    main()
