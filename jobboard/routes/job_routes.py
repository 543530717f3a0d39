from flask import Blueprint, request

from jobboard.routes.responses import json_body, ok
from jobboard.services import job_catalog
from jobboard.services.access import current_user, session_required

jobs_bp = Blueprint("jobs", __name__)


# Get all jobs (public)
@jobs_bp.route("", methods=["GET"])
def list_jobs():
    jobs = job_catalog.list_jobs(
        search=request.args.get("search"),
        location=request.args.get("location"),
        status=request.args.get("status"),
    )
    return ok([job.to_dict(include_employer=True) for job in jobs])


# Get employer's jobs
@jobs_bp.route("/employer/jobs", methods=["GET"])
@session_required("employer")
def employer_jobs():
    jobs = job_catalog.list_by_employer(current_user())
    return ok([job.to_dict() for job in jobs])


# Get single job (public)
@jobs_bp.route("/<job_id>", methods=["GET"])
def get_job(job_id):
    job = job_catalog.get_job(job_id)
    return ok(job.to_dict(include_employer=True))


@jobs_bp.route("", methods=["POST"])
@session_required("employer")
def create_job():
    job = job_catalog.create_job(current_user(), json_body())
    return ok(job.to_dict(), status=201)


@jobs_bp.route("/<job_id>", methods=["PUT"])
@session_required("employer")
def update_job(job_id):
    job = job_catalog.update_job(current_user(), job_id, json_body())
    return ok(job.to_dict())


@jobs_bp.route("/<job_id>", methods=["DELETE"])
@session_required("employer")
def delete_job(job_id):
    job_catalog.delete_job(current_user(), job_id)
    return ok(message="Job deleted successfully")
