from flask import Blueprint

from jobboard.routes.responses import json_body, ok
from jobboard.services import application_ledger
from jobboard.services.access import current_user, session_required

applications_bp = Blueprint("applications", __name__)


# Get all applications for a job (owning employer only)
@applications_bp.route("/job/<job_id>", methods=["GET"])
@session_required("employer")
def applications_for_job(job_id):
    views = application_ledger.list_for_job(current_user(), job_id)
    return ok([view.to_dict() for view in views])


@applications_bp.route("/my-applications", methods=["GET"])
@session_required("jobseeker")
def my_applications():
    views = application_ledger.list_mine(current_user())
    return ok([view.to_dict() for view in views])


# Get all applications for employer's jobs
@applications_bp.route("/employer/applications", methods=["GET"])
@session_required("employer")
def employer_applications():
    views = application_ledger.list_for_employer(current_user())
    return ok([view.to_dict() for view in views])


@applications_bp.route("/<application_id>", methods=["GET"])
@session_required("employer")
def get_application(application_id):
    view = application_ledger.get_for_employer(current_user(), application_id)
    return ok(view.to_dict())


@applications_bp.route("", methods=["POST"])
@session_required("jobseeker")
def submit_application():
    data = json_body()
    application = application_ledger.submit(
        current_user(),
        job_id=data.get("jobId"),
        cover_letter=data.get("coverLetter"),
        resume_url=data.get("resumeUrl"),
    )
    return ok(application.to_dict(), status=201)


@applications_bp.route("/<application_id>/status", methods=["PATCH"])
@session_required("employer")
def update_application_status(application_id):
    data = json_body()
    application = application_ledger.update_status(
        current_user(), application_id, data.get("status")
    )
    return ok(application.to_dict())


# Withdraw application (applicant only)
@applications_bp.route("/<application_id>", methods=["DELETE"])
@session_required("jobseeker")
def withdraw_application(application_id):
    application_ledger.withdraw(current_user(), application_id)
    return ok(message="Application withdrawn successfully")
