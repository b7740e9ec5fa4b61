import tempfile
import time
from pathlib import Path

import jamal

SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="120" height="80">'
    '<circle cx="40" cy="40" r="30" fill="#3178c6"/></svg>'
)


def main() -> None:
    data_dir = Path(tempfile.mkdtemp(prefix="jamal-"))
    srv = jamal.run(port=0, data_dir=data_dir, new_server=True)
    client = srv.client() if isinstance(srv, jamal.JamalServer) else srv
    while not client.is_alive():
        time.sleep(0.05)

    drawing = data_dir / "circle.jamal"
    client.save_drawing(str(drawing), "Circle", {"schemaVersion": 2, "records": {}})
    client.save_png(str(data_dir / "circle.png"), SVG, 200, 100)
    client.save_svg(str(data_dir / "circle.svg"), SVG)

    for f in client.get_recent_files():
        print(f.last_opened, f.name, f.path)


if __name__ == "__main__":
    main()
