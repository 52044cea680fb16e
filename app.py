import gradio as gr

from json_table_viewer.config import get_settings
from json_table_viewer.handlers import (
    NO_SORT,
    SORT_ORDERS,
    load_records_handler,
    next_page_handler,
    page_change_handler,
    prev_page_handler,
    row_select_handler,
    sort_change_handler,
)
from json_table_viewer.logging_utils import configure_logging
from json_table_viewer.pagination import PAGE_SIZE

settings = get_settings()
configure_logging(level=settings.log_level, json_logs=settings.log_json)

# Shimmer placeholder: one bar per row of the first page
SKELETON_HTML = (
    "<style>"
    ".skeleton-bar{height:14px;margin:10px 0;border-radius:4px;"
    "background:linear-gradient(90deg,#eee 25%,#ddd 37%,#eee 63%);"
    "background-size:400% 100%;animation:skeleton-shimmer 1.4s ease infinite;}"
    "@keyframes skeleton-shimmer{0%{background-position:100% 50%}100%{background-position:0 50%}}"
    "</style>"
    + "".join('<div class="skeleton-bar"></div>' for _ in range(PAGE_SIZE))
)

# --- UI Definition ---
with gr.Blocks(title=settings.title) as demo:
    gr.Markdown(f"# {settings.title}")

    # State
    records_state = gr.State(value=[])
    page_state = gr.State(value=1)
    expanded_key_state = gr.State(value=None)

    skeleton = gr.HTML(SKELETON_HTML, visible=True)

    with gr.Column(visible=False) as table_panel:
        with gr.Row():
            sort_key = gr.Dropdown(
                label="Sort by",
                choices=[(NO_SORT, NO_SORT)],
                value=NO_SORT,
                interactive=True,
            )
            sort_order = gr.Radio(choices=SORT_ORDERS, value=SORT_ORDERS[0][1], label="Order")

        table = gr.Dataframe(label="Records (click a row to expand)", interactive=False, wrap=True)
        expansion_panel = gr.Markdown()

        # Page control
        with gr.Row():
            prev_btn = gr.Button("‹ Prev", size="sm")
            page_number = gr.Number(value=1, label="Page", precision=0, minimum=1)
            next_btn = gr.Button("Next ›", size="sm")
        page_summary = gr.Markdown()

    page_outputs = [page_state, page_number, table, page_summary, expansion_panel, expanded_key_state]
    sort_inputs = [sort_key, sort_order]

    demo.load(
        fn=load_records_handler,
        inputs=None,
        outputs=[
            records_state,
            page_state,
            skeleton,
            table_panel,
            table,
            page_number,
            page_summary,
            sort_key,
            expansion_panel,
            expanded_key_state,
        ],
    )

    page_number.submit(
        fn=page_change_handler,
        inputs=[records_state, page_state, page_number] + sort_inputs,
        outputs=page_outputs,
    )

    prev_btn.click(
        fn=prev_page_handler,
        inputs=[records_state, page_state] + sort_inputs,
        outputs=page_outputs,
    )

    next_btn.click(
        fn=next_page_handler,
        inputs=[records_state, page_state] + sort_inputs,
        outputs=page_outputs,
    )

    for control in (sort_key, sort_order):
        control.change(
            fn=sort_change_handler,
            inputs=[records_state, page_state] + sort_inputs,
            outputs=[table, expansion_panel, expanded_key_state],
        )

    table.select(
        fn=row_select_handler,
        inputs=[records_state, page_state] + sort_inputs + [expanded_key_state],
        outputs=[expansion_panel, expanded_key_state],
    )

if __name__ == "__main__":
    demo.launch()
