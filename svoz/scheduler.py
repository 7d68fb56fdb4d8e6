"""
Scheduler Module
Recomputes collection dates daily and at start-up, and sends alerts.
"""

import logging
from datetime import datetime
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger
from config import Config

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Global scheduler instance
scheduler = None


def run_scheduled_update():
    """
    Run the collection schedule update.
    This is the job executed daily and once at start-up; it never raises.
    """
    from svoz.waste_service import update_collection_schedule

    logger.info("=" * 50)
    logger.info(f"Starting collection schedule update at {datetime.now()}")
    logger.info("=" * 50)

    try:
        result = update_collection_schedule()
    except Exception as e:
        logger.error(f"Collection schedule update failed: {e}")
        return None

    logger.info(f"Update complete: {result}")
    return result


def init_scheduler(app=None):
    """Initialize and start the background scheduler."""
    global scheduler

    if scheduler is not None:
        logger.info("Scheduler already initialized")
        return scheduler

    scheduler = BackgroundScheduler()

    # Schedule daily update at configured time (default 6:30am)
    trigger = CronTrigger(
        hour=Config.UPDATE_HOUR,
        minute=Config.UPDATE_MINUTE
    )

    scheduler.add_job(
        run_scheduled_update,
        trigger=trigger,
        id='daily_collection_update',
        name='Daily Collection Schedule Update',
        replace_existing=True
    )

    # Run once right away on start-up
    scheduler.add_job(
        run_scheduled_update,
        id='startup_collection_update',
        name='Start-up Collection Schedule Update',
        next_run_time=datetime.now(),
        replace_existing=True
    )

    scheduler.start()
    logger.info(f"Scheduler started - Daily update at {Config.UPDATE_HOUR:02d}:{Config.UPDATE_MINUTE:02d}")

    return scheduler


def get_scheduled_jobs():
    """Get list of scheduled jobs."""
    global scheduler
    if scheduler is None:
        return []

    jobs = []
    for job in scheduler.get_jobs():
        jobs.append({
            "id": job.id,
            "name": job.name,
            "next_run": str(job.next_run_time) if job.next_run_time else None
        })
    return jobs


def trigger_update_now():
    """Manually trigger the update."""
    logger.info("Manual trigger requested")
    return run_scheduled_update()
