from fpdf import FPDF

from app.core.utils import format_report_date, parse_iso_date
from .schemas import ReportItemResponse, StatusReportResponse

STATUS_LABELS = {
    "pending": "In production",
    "departed": "Shipped",
    "in_transit": "Shipped",
    "arrived": "Arrived",
    "delayed": "Delayed",
}


def _latin1(text: str) -> str:
    # Core PDF fonts only cover Latin-1
    return text.encode("latin-1", "replace").decode("latin-1")


class StatusReportPDF(FPDF):
    def header(self):
        self.set_font("Helvetica", "B", 16)
        self.cell(0, 10, "CONTAINER STATUS REPORT", ln=True, align="C")
        self.ln(2)
        self.set_line_width(0.3)
        self.line(10, self.get_y(), 200, self.get_y())
        self.ln(6)

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.cell(0, 10, f"Page {self.page_no()}", align="C")

    def _section(self, title: str, items: list[ReportItemResponse]) -> None:
        self.set_font("Helvetica", "B", 12)
        self.cell(0, 8, f"{title} ({len(items)})", ln=True)

        # --- Table Header ---
        self.set_font("Helvetica", "B", 10)
        self.set_fill_color(245, 245, 245)
        self.cell(40, 8, "Container", border=1, fill=True)
        self.cell(60, 8, "Cargo", border=1, fill=True)
        self.cell(28, 8, "Arrival", border=1, align="C", fill=True)
        self.cell(27, 8, "Status", border=1, align="C", fill=True)
        self.cell(15, 8, "Qty", border=1, align="R", fill=True)
        self.cell(20, 8, "Progress", border=1, align="R", fill=True)
        self.ln(8)

        # --- Table Items ---
        self.set_font("Helvetica", "", 9)
        for item in items:
            expected = parse_iso_date(item.expected_arrival_date)
            self.cell(40, 8, _latin1(item.container_number)[:24], border=1)
            self.cell(60, 8, _latin1(item.cargo_description or "General cargo")[:36], border=1)
            self.cell(
                28, 8, format_report_date(expected) if expected else "N/A", border=1, align="C"
            )
            self.cell(27, 8, STATUS_LABELS[item.status.value], border=1, align="C")
            self.cell(15, 8, str(item.container_count), border=1, align="R")
            self.cell(20, 8, f"{item.progress_percent:.0f}%", border=1, align="R")
            self.ln(8)
        self.ln(6)

    @staticmethod
    def generate_status_report_pdf(report: StatusReportResponse) -> bytes:
        """
        Render the status report as a printable PDF using fpdf2.
        Returns PDF bytes.
        """
        pdf = StatusReportPDF()
        pdf.add_page()
        pdf.set_auto_page_break(auto=True, margin=20)
        pdf.set_font("Helvetica", size=11)

        pdf.cell(0, 8, f"Date: {format_report_date(report.report_date)}", ln=True)
        pdf.cell(
            0,
            8,
            f"Shipped: {report.summary.shipped}   "
            f"In production: {report.summary.production}   "
            f"Total: {report.summary.total}",
            ln=True,
        )
        pdf.ln(5)

        if report.shipped:
            pdf._section("Shipped containers", report.shipped)
        if report.production:
            pdf._section("Containers in production", report.production)
        if not report.shipped and not report.production:
            pdf.set_font("Helvetica", "I", 10)
            pdf.cell(0, 10, "No shipped or in-production containers.", ln=True)

        pdf.set_font("Helvetica", "I", 9)
        pdf.cell(0, 10, "Days counted until expected arrival.", align="R")

        return bytes(pdf.output())
