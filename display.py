# display.py
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from board import SIZE, Board


#  text
def format_board(board: Board) -> str:
    """Rows of space-separated integers."""
    return "\n".join(" ".join(str(v) for v in row) for row in board.rows)


def print_board(board: Board) -> None:
    print(format_board(board))
    print()


def format_solution(moves: List[str], path: List[Board]) -> str:
    """Initial State, then one 'After <move>:' block per step of the path."""
    blocks = ["Solution sequence:", ""]
    for i, board in enumerate(path):
        if i == 0:
            blocks.append("Initial State:")
        elif i - 1 < len(moves):
            blocks.append(f"After {moves[i - 1]}:")
        blocks.append(format_board(board))
        blocks.append("")
    return "\n".join(blocks)


def format_trace(states: List[Board]) -> str:
    blocks = []
    for i, board in enumerate(states, 1):
        blocks.append(f"Expansion {i}:")
        blocks.append(format_board(board))
        blocks.append("")
    return "\n".join(blocks)


#  image helpers
def _measure_text(draw: ImageDraw.ImageDraw, text: str, font: ImageFont.ImageFont) -> Tuple[int, int]:
    """Text size; falls back to a rough estimate for fonts without bbox support."""
    try:
        l, t, r, b = draw.textbbox((0, 0), text, font=font)
        return r - l, b - t
    except AttributeError:
        return max(8, 8 * len(text)), 12


def slice_image_to_tiles(img: Image.Image, side: int = 600) -> List[Image.Image]:
    """Square-crop, resize, split into 3×3 tiles."""
    img = img.convert("RGB")
    w, h = img.size
    s = min(w, h)
    img = img.crop(((w-s)//2, (h-s)//2, (w+s)//2, (h+s)//2)).resize((side, side))
    tiles: List[Image.Image] = []
    step = side // SIZE
    for r in range(SIZE):
        for c in range(SIZE):
            tiles.append(img.crop((c*step, r*step, (c+1)*step, (r+1)*step)))
    return tiles  # 1..8 map to tiles[val-1]; 0 = blank


def render_grid(board: Board, tiles: Optional[List[Image.Image]] = None, side: int = 600) -> Image.Image:
    """Draw the board as an image."""
    canvas = Image.new("RGB", (side, side), (245, 245, 245))
    step = side // SIZE
    draw = ImageDraw.Draw(canvas)
    font = ImageFont.load_default()
    for i, val in enumerate(board.cells):
        r, c = divmod(i, SIZE)
        x0, y0 = c*step, r*step
        if val == 0:
            continue
        if tiles:
            canvas.paste(tiles[val-1].resize((step, step)), (x0, y0))
        else:
            text = str(val)
            tw, th = _measure_text(draw, text, font)
            draw.text((x0 + (step - tw)//2, y0 + (step - th)//2),
                      text, fill=(30, 30, 30), font=font)
    for k in range(step, side, step):
        draw.line([(k, 0), (k, side)], width=3, fill=(30, 30, 30))
        draw.line([(0, k), (side, k)], width=3, fill=(30, 30, 30))
    return canvas
