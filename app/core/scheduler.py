import logging
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from app.core.clock import system_clock
from app.core.config import settings
from app.core.database import SessionLocal
from app.services.test_session import test_session_service

logger = logging.getLogger(__name__)

scheduler = AsyncIOScheduler()


def finalize_expired_attempts():
    db = SessionLocal()
    try:
        finalized = test_session_service.finalize_expired_attempts(db, clock=system_clock)
        db.commit()
        if finalized:
            logger.info(f"Expiry sweep finalized {finalized} attempts")
    except Exception as e:
        db.rollback()
        logger.error(f"Error finalizing expired attempts: {e}", exc_info=True)
    finally:
        db.close()


def start_scheduler():
    if settings.TESTING:
        logger.info("Scheduler disabled in test environment")
        return

    if not scheduler.running:
        scheduler.add_job(
            finalize_expired_attempts,
            'interval',
            seconds=settings.EXPIRY_SWEEP_INTERVAL_SECONDS,
            id='finalize_expired_attempts',
            name='Finalize Expired Test Attempts',
            replace_existing=True,
            max_instances=1,
            coalesce=True
        )
        scheduler.start()
        logger.info("Scheduler started with expired attempt sweep")


def stop_scheduler():
    if scheduler.running:
        scheduler.shutdown()
        logger.info("Scheduler stopped")
