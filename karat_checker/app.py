# Gold Karat Checker (Streamlit App)
#
# Hydrostatic weighing screening tool: weight in air, weight in water and an
# optional water temperature give a density, two karat estimates, a reconciled
# karat range, a purity category and a consistency indicator.
#
# Run with `karat-checker app` or `streamlit run karat_checker/app.py`.
# Imports are absolute because Streamlit executes this file as a script.

import streamlit as st

from karat_checker.calculator import MeasurementInput, compute_calculation
from karat_checker.chart import figure_png_bytes, render_density_chart
from karat_checker.density import mass_grams
from karat_checker.errors import CalculationError
from karat_checker.metals import get_gold_spot, gold_content_value
from karat_checker.pdf import build_pdf
from karat_checker import ui


def _calculate(inputs):
    measurement = MeasurementInput(
        air_weight=inputs["air_weight"],
        water_weight=inputs["water_weight"],
        water_temperature_c=inputs["water_temp_c"],
        weight_unit=inputs["weight_unit"],
    )
    try:
        result = compute_calculation(measurement)
    except CalculationError as e:
        st.session_state["last_result"] = None
        st.error(e.message)
        return
    spot = get_gold_spot(inputs["spot_oz"])
    value = gold_content_value(result, mass_grams(float(inputs["air_weight"]), inputs["weight_unit"]), spot["per_g"])
    # replaced wholesale on every calculation
    st.session_state["last_result"] = {"inputs": dict(inputs), "result": result, "spot": spot, "value": value}


def main():
    ui.title()
    ui.init_state()
    ui.method_explainer()
    inputs = ui.sidebar_inputs()

    if st.button("Calculate gold purity", type="primary", use_container_width=True):
        _calculate(inputs)

    last = st.session_state.get("last_result")
    if last:
        result = last["result"]
        ui.render_result(result)
        ui.render_value(last["value"], last["spot"])

        fig = render_density_chart(result)
        st.pyplot(fig)
        png = figure_png_bytes(fig)

        unit = "g" if last["inputs"]["weight_unit"] == "gram" else "ct"
        report_inputs = {
            "Weight in air": f"{last['inputs']['air_weight']:.2f} {unit}",
            "Weight in water": f"{last['inputs']['water_weight']:.2f} {unit}",
            "Water temperature": f"{last['inputs']['water_temp_c']:.1f} °C",
        }
        pdf_bytes = build_pdf(report_inputs, result, last["value"], png)
        st.download_button("Download PDF report", data=pdf_bytes,
                           file_name="karat_report.pdf", mime="application/pdf")

    ui.disclaimer()
    ui.render_reference_table()


if __name__ == "__main__":
    main()
