import matplotlib.pyplot as plt

from karat_checker import MeasurementInput, compute_calculation
from karat_checker.chart import figure_png_bytes, render_density_chart
from karat_checker.metals import gold_content_value
from karat_checker.pdf import build_pdf


def test_chart_without_result():
    fig = render_density_chart()
    ax = fig.axes[0]
    assert len(ax.patches) == 19
    plt.close(fig)


def test_chart_marks_measured_density():
    result = compute_calculation(MeasurementInput(10.5, 9.8))
    fig = render_density_chart(result)
    ax = fig.axes[0]
    assert any(abs(line.get_xdata()[0] - result.density) < 1e-9 for line in ax.get_lines())
    png = figure_png_bytes(fig)
    assert png.startswith(b"\x89PNG")


def test_chart_outside_table():
    result = compute_calculation(MeasurementInput(5, 4))
    fig = render_density_chart(result)
    assert fig.axes[0].get_xlim()[0] < 5.0
    plt.close(fig)


def test_pdf_report():
    result = compute_calculation(MeasurementInput(10.5, 9.8))
    png = figure_png_bytes(render_density_chart(result))
    value = gold_content_value(result, 10.5, 80.0)
    pdf = build_pdf({"Weight in air": "10.50 g", "Weight in water": "9.80 g"}, result, value, png)
    assert pdf.startswith(b"%PDF")


def test_pdf_report_minimal():
    result = compute_calculation(MeasurementInput(5, 4))
    assert build_pdf({}, result).startswith(b"%PDF")
