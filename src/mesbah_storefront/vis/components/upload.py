"""Drag-and-drop image upload with a client-only preview."""

import solara

from mesbah_storefront.vis.state.storefront import StorefrontState


@solara.component
def ImageUpload(state: StorefrontState):
    def on_file(file_info):
        state.select_file(file_info["name"], file_info["size"])

    with solara.Column(classes=["image-upload-area"]):
        solara.FileDrop(
            label="Drag an image here, or click to browse (PNG or JPEG, up to 5MB)",
            on_file=on_file,
            lazy=True,
        )
        if state.upload_error.value:
            solara.Error(state.upload_error.value)

        preview = state.upload_preview.value
        if preview is not None:
            solara.Text(preview.status_text, classes=["upload-text"])
            solara.Markdown("**File ready for upload**")
