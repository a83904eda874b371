"""Browser upload pages for the grocery analysis endpoint."""

import json

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from grocery_organizer.services.grocery_list import (
    EXTRACTION_ERROR_MESSAGE,
    GROCERY_LIST_PATTERN,
)

INVALID_FILE_MESSAGE = "Please select a valid image file"
NO_FILE_MESSAGE = "Please select an image first"
REQUEST_FAILED_MESSAGE = "Failed to process the image"
GENERIC_ERROR_MESSAGE = "An error occurred while processing your request"

router = APIRouter(include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
async def organizer_page() -> HTMLResponse:
    """Upload page that shows the fragility-sorted grocery list."""
    return HTMLResponse(ORGANIZER_PAGE)


@router.get("/describe", response_class=HTMLResponse)
async def describe_page() -> HTMLResponse:
    """Upload page that shows the model's description verbatim."""
    return HTMLResponse(DESCRIBE_PAGE)


def render_page(  # noqa: PLR0913
    *,
    title: str,
    subtitle: str,
    button_label: str,
    loading_label: str,
    result_heading: str,
    view: str,
    endpoint: str,
) -> str:
    """Fill the upload page template for one result view."""
    replacements = {
        "__TITLE__": title,
        "__SUBTITLE__": subtitle,
        "__BUTTON_LABEL__": button_label,
        "__LOADING_LABEL__": loading_label,
        "__RESULT_HEADING__": result_heading,
        "__VIEW__": view,
        "__ENDPOINT__": endpoint,
        "__GROCERY_LIST_PATTERN__": GROCERY_LIST_PATTERN.pattern,
        "__EXTRACTION_ERROR__": json.dumps(EXTRACTION_ERROR_MESSAGE),
        "__INVALID_FILE_ERROR__": json.dumps(INVALID_FILE_MESSAGE),
        "__NO_FILE_ERROR__": json.dumps(NO_FILE_MESSAGE),
        "__REQUEST_FAILED_ERROR__": json.dumps(REQUEST_FAILED_MESSAGE),
        "__GENERIC_ERROR__": json.dumps(GENERIC_ERROR_MESSAGE),
    }
    page = _UPLOAD_PAGE_HTML
    for placeholder, value in replacements.items():
        page = page.replace(placeholder, value)
    return page


_UPLOAD_PAGE_HTML = r"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>__TITLE__</title>
    <style>
      body { background: #000; color: #e5e7eb; font-family: ui-sans-serif, system-ui, sans-serif; margin: 0; }
      main { max-width: 42rem; margin: 0 auto; padding: 1.5rem; }
      h1 { text-align: center; color: #fff; }
      .subtitle { text-align: center; color: #9ca3af; }
      .dropzone { border: 2px dashed #374151; border-radius: 0.75rem; padding: 2rem; text-align: center; background: rgba(17, 24, 39, 0.5); }
      .dropzone label { cursor: pointer; color: #9ca3af; }
      .dropzone img { display: block; max-height: 16rem; margin: 1rem auto 0; border: 1px solid #374151; border-radius: 0.5rem; }
      button { width: 100%; margin-top: 1.5rem; padding: 0.75rem; border: 0; border-radius: 0.5rem; background: #2563eb; color: #fff; font-size: 1rem; cursor: pointer; }
      button:disabled { background: #1f2937; color: #6b7280; cursor: not-allowed; }
      .error { margin-top: 1.5rem; padding: 1rem; border: 1px solid #991b1b; border-radius: 0.5rem; background: rgba(127, 29, 29, 0.5); color: #fecaca; }
      .result { margin-top: 1.5rem; padding: 1.5rem; border: 1px solid #1f2937; border-radius: 0.75rem; background: rgba(17, 24, 39, 0.5); }
      .result pre { white-space: pre-wrap; margin: 0; }
    </style>
  </head>
  <body>
    <main>
      <h1>__TITLE__</h1>
      <p class="subtitle">__SUBTITLE__</p>
      <div class="dropzone">
        <input id="file-upload" type="file" accept="image/*" hidden />
        <label for="file-upload">Click to upload your grocery list image</label>
        <img id="preview" alt="Preview" hidden />
      </div>
      <button id="submit" disabled>__BUTTON_LABEL__</button>
      <div id="error" class="error" hidden></div>
      <div id="result" class="result" hidden>
        <h2>__RESULT_HEADING__</h2>
        <ul id="items"></ul>
        <pre id="text"></pre>
      </div>
    </main>
    <script>
      const VIEW = "__VIEW__";
      const ENDPOINT = "__ENDPOINT__";
      const GROCERY_LIST_PATTERN = /__GROCERY_LIST_PATTERN__/;
      const EXTRACTION_ERROR = __EXTRACTION_ERROR__;
      const INVALID_FILE_ERROR = __INVALID_FILE_ERROR__;
      const NO_FILE_ERROR = __NO_FILE_ERROR__;
      const REQUEST_FAILED_ERROR = __REQUEST_FAILED_ERROR__;
      const GENERIC_ERROR = __GENERIC_ERROR__;

      const fileInput = document.getElementById("file-upload");
      const preview = document.getElementById("preview");
      const submitButton = document.getElementById("submit");
      const errorBox = document.getElementById("error");
      const resultBox = document.getElementById("result");
      const itemsList = document.getElementById("items");
      const textBox = document.getElementById("text");

      let selectedFile = null;
      let loading = false;

      function setError(message) {
        errorBox.textContent = message;
        errorBox.hidden = !message;
      }

      function setLoading(value) {
        loading = value;
        submitButton.textContent = loading ? "__LOADING_LABEL__" : "__BUTTON_LABEL__";
        submitButton.disabled = !selectedFile || loading;
      }

      function clearResult() {
        itemsList.replaceChildren();
        textBox.textContent = "";
        resultBox.hidden = true;
      }

      function showItems(items) {
        itemsList.replaceChildren(
          ...items.map((item) => {
            const li = document.createElement("li");
            li.textContent = item;
            return li;
          })
        );
        resultBox.hidden = items.length === 0;
      }

      function showText(text) {
        textBox.textContent = text;
        resultBox.hidden = !text;
      }

      function parseGroceryList(text) {
        const match = text.match(GROCERY_LIST_PATTERN);
        if (!match) {
          throw new Error(EXTRACTION_ERROR);
        }
        let items;
        try {
          items = JSON.parse(match[1]);
        } catch (err) {
          throw new Error(EXTRACTION_ERROR);
        }
        if (!items.every((item) => typeof item === "string")) {
          throw new Error(EXTRACTION_ERROR);
        }
        return items;
      }

      fileInput.addEventListener("change", (event) => {
        const file = event.target.files[0] || null;
        if (file && file.type.startsWith("image/")) {
          selectedFile = file;
          setError("");
          const reader = new FileReader();
          reader.onloadend = () => {
            preview.src = reader.result;
            preview.hidden = false;
          };
          reader.readAsDataURL(file);
        } else {
          setError(INVALID_FILE_ERROR);
          selectedFile = null;
          preview.removeAttribute("src");
          preview.hidden = true;
        }
        setLoading(loading);
      });

      submitButton.addEventListener("click", async () => {
        if (!selectedFile) {
          setError(NO_FILE_ERROR);
          return;
        }
        setLoading(true);
        setError("");
        clearResult();
        try {
          const formData = new FormData();
          formData.append("file", selectedFile);
          const response = await fetch(ENDPOINT, { method: "POST", body: formData });
          const data = await response.json();
          if (!response.ok) {
            throw new Error(data.error || REQUEST_FAILED_ERROR);
          }
          if (VIEW === "list") {
            showItems(parseGroceryList(data.result || ""));
          } else {
            showText(data.result || "");
          }
        } catch (err) {
          setError((err && err.message) || GENERIC_ERROR);
        } finally {
          setLoading(false);
        }
      });
    </script>
  </body>
</html>
"""

ORGANIZER_PAGE = render_page(
    title="Smart Grocery List Organizer",
    subtitle=(
        "Upload a picture of your grocery list, and I'll organize items "
        "from most fragile to least fragile"
    ),
    button_label="Organize List",
    loading_label="Organizing your list...",
    result_heading="Your Organized Grocery List",
    view="list",
    endpoint="/api/grocery?mode=organize",
)

DESCRIBE_PAGE = render_page(
    title="Grocery List Reader",
    subtitle="Upload a picture of your grocery list to see what's on it",
    button_label="Read List",
    loading_label="Reading your list...",
    result_heading="What's in your picture",
    view="text",
    endpoint="/api/grocery?mode=describe",
)
