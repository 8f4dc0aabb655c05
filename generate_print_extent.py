import time

from config import CONFIG
from mapgeo.crs import parse_projection
from mapgeo.epsg3857 import compute_scaling_factor
from mapgeo.logger import logger
from mapgeo.map_bounds import BBoxMapBounds, CenterScaleMapBounds
from mapgeo.scale import Scale
from mapgeo.units import DistanceUnit


def main():
    # Start timing
    start_time = time.time()

    projection = parse_projection(CONFIG.projection)
    scale = Scale(CONFIG.scale_denominator, DistanceUnit.M, CONFIG.dpi)
    bounds = CenterScaleMapBounds(projection, *CONFIG.center, scale)
    paint_area = CONFIG.paint_area

    logger.info(f"Computing print extent of {projection.name} at {scale}...")
    logger.info(
        f"Page: {paint_area.width}px x {paint_area.height}px, "
        f"resolution {scale.resolution:.3f} {scale.unit}/px"
    )

    factor = compute_scaling_factor(bounds)
    logger.info(f"Mercator scaling factor at center: {factor:.6f}")

    envelope = bounds.to_referenced_envelope(paint_area, geodetic=CONFIG.geodetic)
    logger.info(f"Envelope: {envelope.geometry.wkt}")

    bbox_bounds = BBoxMapBounds(envelope)
    geodetic_scale = bbox_bounds.scale(paint_area, CONFIG.dpi, geodetic=True)
    logger.info(f"Geodetic scale of the envelope: 1:{geodetic_scale.denominator:.0f}")

    end_time = time.time()
    logger.info(f"Total execution time: {end_time - start_time:.3f} seconds")


if __name__ == "__main__":
    main()
