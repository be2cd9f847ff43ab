import sys
from datetime import date, datetime, time, timedelta
import typer
from gdp.config import settings
from gdp.logging import logger

app = typer.Typer(no_args_is_help=True)

@app.callback()
def main():
    """
    GDP project & HR management CLI.
    """
    pass

@app.command(name="doctor")
def doctor():
    """
    Check system configuration and environment health.
    """
    logger.info("Running doctor check...")

    failures: list[str] = []
    passed = 0

    print("\n🩺 GDP Doctor\n")

    # ── Check 1: Environment / Interpreter ──────────────────────────────────
    print("[Environment]")
    print(f"  Python: {sys.version.split()[0]}")
    print(f"  Prefix: {sys.prefix}")
    passed += 1

    # ── Check 2: JWT secret ──────────────────────────────────────────────────
    print("\n[Configuration]")
    secret = settings.JWT_SECRET.get_secret_value()
    if secret and secret != "change-me":
        print("  JWT_SECRET:                  ✅ Set")
        passed += 1
    else:
        print("  JWT_SECRET:                  ❌ Missing or default")
        failures.append("JWT_SECRET is not set — add it to .env")

    print(f"  JWT_ALGORITHM:               {settings.JWT_ALGORITHM}")
    print(f"  DATABASE_URL:                {settings.DATABASE_URL}")
    print(f"  API_BASE_URL:                {settings.API_BASE_URL}")

    # ── Check 3: Client storage ─────────────────────────────────────────────
    print("\n[Client Storage]")
    from gdp.ui.validation import validate_storage_dir, validate_backend_connection
    storage_errors = validate_storage_dir()
    if storage_errors:
        print(f"  {settings.storage_dir}        ❌ Not writable")
        failures.extend(storage_errors)
    else:
        print(f"  {settings.storage_dir}        ✅ Writable")
        passed += 1

    # ── Check 4: Backend ─────────────────────────────────────────────────────
    print("\n[Backend]")
    backend_errors = validate_backend_connection()
    if backend_errors:
        print(f"  {settings.API_BASE_URL}      ❌ Unreachable")
        failures.extend(backend_errors)
    else:
        print(f"  {settings.API_BASE_URL}      ✅ Healthy")
        passed += 1

    # ── Summary ──────────────────────────────────────────────────────────────
    total = passed + len(failures)
    print(f"\n{'─' * 50}")
    if failures:
        print(f"Result: {passed}/{total} checks passed\n")
        for msg in failures:
            print(f"  ❌ {msg}")
        print()
        raise typer.Exit(code=1)
    else:
        print(f"Result: {passed}/{total} checks passed — all good ✅")
        print()


db_app = typer.Typer(help="Database management commands.")
app.add_typer(db_app, name="db")

@db_app.command("init")
def init():
    """Initialize the database tables."""
    from gdp.db import init_db
    from sqlalchemy.exc import SQLAlchemyError
    try:
        init_db()
        logger.info("Database initialized successfully.")
        print("✅ Database initialized.")
    except SQLAlchemyError as e:
        logger.error(f"Failed to initialize database: {e}")
        print(f"❌ Failed: {e}")
        raise typer.Exit(code=1)

@db_app.command("seed")
def seed():
    """Insert a small demo dataset (three users, projects, tasks, congés, a periodic task)."""
    from gdp.db import init_db
    from gdp.infra.db.uow import UnitOfWork
    from gdp.models import (
        User, UserStatus, Project, ProjectStatus, ProjectPriority,
        Tache, TaskStatus, TaskPriority, Conge, CongeType, CongeStatus, Notification,
    )
    from gdp.models.periodic import PeriodicTask
    from gdp.domain.periodicity import Periodicity
    from gdp.domain.roles import Role

    init_db()
    today = date.today()
    with UnitOfWork() as uow:
        if uow.users.list_all():
            print("ℹ️  Database already has data; nothing to do.")
            return

        admin = User(username="admin", first_name="Amina", last_name="Admin", email="admin@gdp.local",
                     matricule="A001", role=Role.ADMIN, status=UserStatus.ACTIF)
        dev = User(username="dev", first_name="Driss", last_name="Dev", email="dev@gdp.local",
                   matricule="D001", role=Role.DEVELOPPER, status=UserStatus.ACTIF)
        infra = User(username="infra", first_name="Ines", last_name="Infra", email="infra@gdp.local",
                     matricule="I001", role=Role.INFRA, status=UserStatus.ACTIF)

        portal = Project(name="Portail RH", description="Self-service congés",
                         status=ProjectStatus.IN_PROGRESS, priorite=ProjectPriority.HIGH, users=[dev, admin])
        infra_p = Project(name="Migration serveurs", description="Nouveau cluster",
                          status=ProjectStatus.TO_DO, priorite=ProjectPriority.MEDIUM, users=[infra])
        legacy = Project(name="Intranet v1", description="Archivé",
                         status=ProjectStatus.COMPLETED, priorite=ProjectPriority.LOW, users=[dev])
        for user in (admin, dev, infra):
            uow.users.add(user)
        for project in (portal, infra_p, legacy):
            uow.projects.add(project)

        tasks = [
            Tache(title="Formulaire de demande", status=TaskStatus.DONE, priority=TaskPriority.HIGH,
                  project_id=portal.id, user_id=dev.id),
            Tache(title="Validation manager", status=TaskStatus.IN_PROGRESS, priority=TaskPriority.HIGH,
                  project_id=portal.id, user_id=dev.id),
            Tache(title="Inventaire", status=TaskStatus.TO_DO, priority=TaskPriority.LOW,
                  project_id=infra_p.id, user_id=infra.id),
        ]
        for task in tasks:
            uow.projects.add_task(task)
        start = today.replace(day=1)
        conges = [
            Conge(user_id=dev.id, matricule="D001", service="IT", responsable="Amina Admin",
                  type=CongeType.CONGE, start_date=start, end_date=start + timedelta(days=4),
                  date_reprise=start + timedelta(days=5), first_name="Driss", last_name="Dev",
                  status=CongeStatus.APPROVED),
            Conge(user_id=infra.id, matricule="I001", service="Infra", responsable="Amina Admin",
                  type=CongeType.MALADIE, start_date=start + timedelta(days=10),
                  end_date=start + timedelta(days=12), date_reprise=start + timedelta(days=13),
                  first_name="Ines", last_name="Infra"),
        ]
        for conge in conges:
            uow.conges.add(conge)
        uow.notifications.add(Notification(user_id=admin.id, message="Nouvelle demande de congé de Ines Infra"))
        uow.periodic_tasks.add(PeriodicTask(
            title="Sauvegarde mensuelle", description="Export de la base RH",
            send_date=datetime.combine(start, time(8, 0)), periodicite=Periodicity.MENSUEL,
            heure_execution=time(8, 0), users=[infra],
        ))
    logger.info("Demo data seeded.")
    print("✅ Demo data seeded.")

if __name__ == "__main__":
    app()
