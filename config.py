from mapgeo.project_types import PrintConfig

CONFIG: PrintConfig = PrintConfig(
    projection="EPSG:3857",
    center=(-8232697.0, 4976593.0),  # Manhattan, Web Mercator metres
    scale_denominator=25000,
    dpi=72,
    page_width_px=800,
    page_height_px=600,
    geodetic=True,
)
