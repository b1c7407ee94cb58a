import gradio as gr

from openapi_schema_generator.config import DEFAULT_TITLE, DEFAULT_VERSION
from openapi_schema_generator.handlers import generate_spec_handler

# --- UI Definition ---
with gr.Blocks(title="OpenAPI Schema Generator") as demo:
    gr.Markdown("# OpenAPI Schema Generator")
    gr.Markdown(
        "Upload a zip archive of a JSON directory tree (loose JSON files are placed at the root). "
        "Every directory gets a schema for the files it holds, "
        "and an aggregated schema for everything beneath it."
    )

    with gr.Row():
        # Left Panel: Input & Settings
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            upload_input = gr.File(
                label="Upload Zipped JSON Directory",
                file_count="multiple",
                file_types=[".zip", ".json"],
            )

            gr.Markdown("### 2. Settings")
            title_input = gr.Textbox(label="Title", value=DEFAULT_TITLE)
            version_input = gr.Textbox(label="Version", value=DEFAULT_VERSION)
            max_enum_input = gr.Number(
                label="Max enum values (0 = unlimited)",
                value=0,
                precision=0,
                minimum=0,
            )
            flatten_input = gr.Checkbox(label="Treat top-level arrays as lists of documents", value=False)
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="openapi")

            generate_btn = gr.Button("Generate Spec", variant="primary")
            status_msg = gr.Textbox(label="Status", interactive=False)
            download_output = gr.File(label="Download Spec")

        # Right Panel: Output
        with gr.Column(scale=2):
            gr.Markdown("### 3. Generated Spec")
            spec_output = gr.JSON(label="OpenAPI Document")

    generate_btn.click(
        fn=generate_spec_handler,
        inputs=[upload_input, title_input, version_input, max_enum_input, flatten_input, output_filename],
        outputs=[spec_output, download_output, status_msg],
    )

if __name__ == "__main__":
    demo.launch()
