# main.py
import argparse
import random
import sys

import numpy as np
import pygame

from pathtracer.geometry.bvh import BVHNode
from pathtracer.renderer.raytracer import MAX_DEPTH, SAMPLES_PER_PIXEL, Renderer
from pathtracer.renderer.tone_mapping import save_image, to_rgb8
from pathtracer.scenes import SCENES


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Offline Monte Carlo path tracer")
    parser.add_argument('--scene', type=str, default='random_spheres', choices=sorted(SCENES),
                        help='Scene to render (default: random_spheres)')
    parser.add_argument('--width', type=int, default=400, help='Image width in pixels (default: 400)')
    parser.add_argument('--aspect-ratio', type=float, default=16.0 / 9.0,
                        help='Width / height (default: 16/9)')
    parser.add_argument('--samples', type=int, default=SAMPLES_PER_PIXEL,
                        help=f'Samples per pixel (default: {SAMPLES_PER_PIXEL})')
    parser.add_argument('--depth', type=int, default=MAX_DEPTH,
                        help=f'Maximum bounces per path (default: {MAX_DEPTH})')
    parser.add_argument('--workers', type=int, default=None,
                        help='Worker processes (default: one per CPU)')
    parser.add_argument('--seed', type=int, default=None, help='Seed for a reproducible render')
    parser.add_argument('--output', type=str, default='image.png', help='Output image path (default: image.png)')
    parser.add_argument('--no-bvh', action='store_true', help='Intersect the scene list directly')
    parser.add_argument('--preview', action='store_true', help='Show the result in a window')
    parser.add_argument('--quiet', action='store_true', help='Suppress progress output')
    return parser.parse_args(argv)


def show_preview(rgb8: np.ndarray, caption: str = "Path Tracer"):
    """Display an (height, width, 3) uint8 image until the window is closed."""
    pygame.init()
    try:
        height, width = rgb8.shape[:2]
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(caption)
        # surfarray expects (width, height, 3)
        surf = pygame.surfarray.make_surface(np.ascontiguousarray(rgb8.transpose(1, 0, 2)))
        screen.blit(surf, (0, 0))
        pygame.display.flip()
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.width <= 0 or args.aspect_ratio <= 0:
        print("Error: width and aspect ratio must be positive", file=sys.stderr)
        return 2
    if args.samples <= 0 or (args.workers is not None and args.workers <= 0):
        print("Error: samples and workers must be positive", file=sys.stderr)
        return 2
    if args.depth < 0:
        print("Error: depth must not be negative", file=sys.stderr)
        return 2
    height = max(1, int(args.width / args.aspect_ratio))
    verbose = not args.quiet
    rng = random.Random(args.seed)

    world, camera = SCENES[args.scene](args.aspect_ratio, rng)
    if verbose:
        print("\n=== Creating World ===")
        print(f"Scene: {args.scene}")
        print(f"Objects: {len(world)}")

    if not args.no_bvh:
        if verbose:
            print(f"Building BVH for {len(world)} objects...")
        world = BVHNode.from_list(world, camera.time0, camera.time1, rng)
        if verbose:
            print(f"BVH built, depth {world.depth()}")

    renderer = Renderer(args.width, height, samples_per_pixel=args.samples, max_depth=args.depth,
                        workers=args.workers, seed=args.seed, verbose=verbose)
    rgb8 = to_rgb8(renderer.render(world, camera))
    save_image(rgb8, args.output)
    if verbose:
        print(f"Wrote {args.output}")

    if args.preview:
        show_preview(rgb8, caption=f"Path Tracer - {args.scene}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
