"""Request helpers shared by the API tests."""


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


def register(client, email, role, name=None, password="secret123", company=None):
    payload = {
        "name": name or email.split("@")[0].title(),
        "email": email,
        "password": password,
        "role": role,
    }
    if company is not None:
        payload["company"] = company
    response = client.post("/api/auth/register", json=payload)
    assert response.status_code == 201, response.get_json()
    data = response.get_json()["data"]
    return data["token"], data["user"]


def job_payload(**overrides):
    payload = {
        "title": "Engineer",
        "company": "Acme",
        "location": "Berlin, Germany",
        "type": "full-time",
        "description": "Build and operate backend services.",
        "requirements": "Python and SQL",
        "salary": {"min": 50000, "max": 90000, "currency": "USD"},
    }
    payload.update(overrides)
    return payload


def post_job(client, token, **overrides):
    response = client.post("/api/jobs", json=job_payload(**overrides), headers=auth_header(token))
    assert response.status_code == 201, response.get_json()
    return response.get_json()["data"]


def apply(client, token, job_id, cover_letter="I am a great fit.", resume_url="http://files.example.com/cv.pdf"):
    return client.post(
        "/api/applications",
        json={"jobId": job_id, "coverLetter": cover_letter, "resumeUrl": resume_url},
        headers=auth_header(token),
    )
