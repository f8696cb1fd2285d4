import os
import tempfile
import gradio as gr
import PIL.Image
from perspective_guides import constants
from perspective_guides.config import GuideConfig
from perspective_guides.core import PerspectiveGuide
from perspective_guides.drawing import render_image, save_guide

# Keep the previous preview visible while a new one renders
CSS = """
#preview_img img { object-fit: contain; background-color: #ffffff; }
.generating, .pending { opacity: 1 !important; filter: none !important; transition: none !important; }
"""

PREVIEW_DPI = 50


def _optional_percent(enabled, value):
    return int(value) if enabled else None


def build_config(page_size, orientation, horizon, use_vp1, vp1, use_vp2, vp2, angle, colour):
    return GuideConfig(
        page_size=page_size,
        orientation=orientation,
        horizon=int(horizon),
        vp1=_optional_percent(use_vp1, vp1),
        vp2=_optional_percent(use_vp2, vp2),
        angle=float(angle),
        colour=colour.lstrip("#"),
    )


def render_preview(page_size, orientation, horizon, use_vp1, vp1, use_vp2, vp2, angle, colour,
                   dpi=PREVIEW_DPI):
    """Low resolution preview of a guide as a PIL image."""
    guide = PerspectiveGuide(build_config(page_size, orientation, horizon, use_vp1, vp1,
                                          use_vp2, vp2, angle, colour))
    return PIL.Image.fromarray(render_image(guide, dpi=dpi))


def export_pdf(page_size, orientation, horizon, use_vp1, vp1, use_vp2, vp2, angle, colour,
               out_dir=None):
    """Write the full-size PDF to a temporary directory and return its path."""
    guide = PerspectiveGuide(build_config(page_size, orientation, horizon, use_vp1, vp1,
                                          use_vp2, vp2, angle, colour))
    out_dir = out_dir or tempfile.mkdtemp(prefix="perspective-guide-")
    return str(save_guide(guide, os.path.join(out_dir, guide.default_filename())))


def create_ui():

    def safe_preview(*values):
        try:
            return render_preview(*values)
        except ValueError as exc:
            raise gr.Error(str(exc))

    def safe_export(*values):
        try:
            return export_pdf(*values)
        except ValueError as exc:
            raise gr.Error(str(exc))

    with gr.Blocks(title="Perspective Guide") as demo:

        gr.Markdown("# Perspective Guide")
        gr.Markdown("One- and two-point perspective grids for printing.")

        with gr.Row():
            with gr.Column(scale=1):
                with gr.Group():
                    gr.Markdown("### Page")
                    page_size = gr.Dropdown(choices=list(constants.PAGE_SIZES), value=constants.DEFAULT_PAGE_SIZE,
                                            allow_custom_value=True, label="Page size",
                                            info="Standard name or <W>x<H> in mm or in, e.g. 9inx12in")
                    orientation = gr.Radio(choices=list(constants.ORIENTATIONS),
                                           value=constants.DEFAULT_ORIENTATION, label="Orientation")
                    horizon = gr.Slider(minimum=1, maximum=99, value=constants.DEFAULT_HORIZON_PERCENT, step=1,
                                        label="Horizon (%)", info="Height of the horizon line")

                with gr.Group():
                    gr.Markdown("### Vanishing points")
                    use_vp1 = gr.Checkbox(value=True, label="VP1 (left)")
                    vp1 = gr.Slider(minimum=-200, maximum=300, value=50, step=1, label="VP1 (%)",
                                    info="From centre to the left border; over 100 is off the page")
                    use_vp2 = gr.Checkbox(value=False, label="VP2 (right)")
                    vp2 = gr.Slider(minimum=-200, maximum=300, value=50, step=1, label="VP2 (%)",
                                    info="From centre to the right border; over 100 is off the page")

                with gr.Group():
                    gr.Markdown("### Lines")
                    angle = gr.Slider(minimum=1, maximum=180, value=constants.DEFAULT_ANGLE_DEGREES, step=1,
                                      label="Angle increment (deg)")
                    colour = gr.ColorPicker(value="#" + constants.DEFAULT_COLOUR, label="Line colour")

                export_btn = gr.Button("Export PDF", variant="primary")

            with gr.Column(scale=2):
                preview_img = gr.Image(label="Preview", interactive=False, elem_id="preview_img")
                pdf_file = gr.File(label="PDF")

        inputs = [page_size, orientation, horizon, use_vp1, vp1, use_vp2, vp2, angle, colour]

        for input_comp in inputs:
            input_comp.change(fn=safe_preview, inputs=inputs, outputs=preview_img,
                              trigger_mode="always_last", show_progress="hidden")

        export_btn.click(fn=safe_export, inputs=inputs, outputs=pdf_file)

        demo.load(fn=safe_preview, inputs=inputs, outputs=preview_img, show_progress="hidden")

    return demo


if __name__ == "__main__":
    demo = create_ui()
    demo.launch(css=CSS)
