from datetime import date, timedelta

from app.core.utils import utcnow
from app.modules.containers.models import Container, ContainerStatus
from app.modules.dashboard.service import DashboardService
from app.modules.reports.report_generator import StatusReportPDF
from app.modules.reports.service import ReportService
from conftest import login

TODAY = date(2024, 1, 10)


def make_container(id, number, status, expected=None, actual=None, cargo=None) -> Container:
    return Container(
        id=id,
        user_id="user-a",
        container_number=number,
        departure_port="Shanghai",
        arrival_port="Santos",
        status=status,
        expected_arrival_date=expected,
        actual_arrival_date=actual,
        cargo_description=cargo,
    )


CONTAINERS = [
    make_container(1, "101-103", ContainerStatus.in_transit, "2024-01-15", cargo="Tiles"),
    make_container(2, "MSCU1", ContainerStatus.departed, "2024-01-05"),
    make_container(3, "MSCU2", ContainerStatus.pending, "2024-02-20"),
    make_container(4, "MSCU3", ContainerStatus.arrived, "2024-01-02", actual="2024-01-03"),
    make_container(5, "MSCU4", ContainerStatus.delayed),
]


def test_status_report_groups_shipped_and_production():
    report = ReportService.build_status_report(CONTAINERS, TODAY)

    assert report.report_date == TODAY
    assert report.summary.model_dump() == {"shipped": 2, "production": 1, "total": 5}
    assert [item.id for item in report.shipped] == [1, 2]
    assert [item.id for item in report.production] == [3]

    first = report.shipped[0]
    assert first.days_to_arrival == 5
    assert first.progress_percent == 83.33
    assert first.urgency == "urgent"
    assert first.container_count == 3

    overdue = report.shipped[1]
    assert overdue.days_to_arrival == -5
    assert overdue.progress_percent == 100.0

    production = report.production[0]
    assert production.days_to_arrival == 41
    assert production.progress_percent == 0.0
    assert production.urgency == "normal"


def test_status_report_pdf_renders():
    report = ReportService.build_status_report(CONTAINERS, TODAY)
    pdf_bytes = StatusReportPDF.generate_status_report_pdf(report)
    assert pdf_bytes.startswith(b"%PDF")


def test_empty_status_report_pdf_renders():
    report = ReportService.build_status_report([], TODAY)
    assert StatusReportPDF.generate_status_report_pdf(report).startswith(b"%PDF")


def test_dashboard_stats():
    stats = DashboardService.compute_stats(CONTAINERS, TODAY)
    # arriving: only #1 is 0..7 days out; delayed: #2 is overdue with no actual arrival
    assert stats.model_dump() == {"total": 5, "in_transit": 2, "arriving": 1, "delayed": 1}


def test_report_and_dashboard_endpoints(client):
    login(client, "token-a")
    today = utcnow().date()
    soon = (today + timedelta(days=3)).isoformat()
    client.post(
        "/api/containers",
        json={
            "container_number": "MSCU1",
            "departure_port": "Shanghai",
            "arrival_port": "Santos",
            "status": "in_transit",
            "expected_arrival_date": soon,
        },
    )

    report = client.get("/api/reports/status")
    assert report.status_code == 200
    body = report.json()
    assert body["summary"] == {"shipped": 1, "production": 0, "total": 1}
    assert body["shipped"][0]["container_number"] == "MSCU1"

    dashboard = client.get("/api/dashboard")
    assert dashboard.status_code == 200
    assert dashboard.json()["in_transit"] == 1

    pdf = client.get("/api/reports/status.pdf")
    assert pdf.status_code == 200
    assert pdf.headers["content-type"] == "application/pdf"
    assert pdf.content.startswith(b"%PDF")


def test_report_endpoints_require_a_session(client):
    assert client.get("/api/reports/status").status_code == 401
    assert client.get("/api/reports/status.pdf").status_code == 401
    assert client.get("/api/dashboard").status_code == 401
