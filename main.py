import time
import argparse
from core.scene import RenderSettings
from scene_builders.default_scene_builder import DefaultSceneBuilder
from scene_builders.json_scene_builder import JsonSceneBuilder, SceneFormatError
from renderers.base_renderer import RendererFactory

# 렌더러 모듈들 import (등록을 위해)
import renderers.cpu_renderer
import renderers.flat_renderer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Phong Ray Tracer')
    parser.add_argument('--renderer', '-r',
                        choices=RendererFactory.list_available(),
                        default='cpu_raytracer',
                        help='렌더러 선택')
    parser.add_argument('--scene',
                        default='default',
                        help="씬 선택: default (기본 데모 씬) 또는 JSON 씬 파일 경로")
    parser.add_argument('--width', '-w', type=int, default=400,
                        help='이미지 가로 크기')
    parser.add_argument('--height', type=int, default=300,
                        help='이미지 세로 크기')
    parser.add_argument('--output', '-o', default='output.png',
                        help='출력 파일명')
    parser.add_argument('--no-shadow-ambient', action='store_true',
                        help='그림자 속에서는 조명의 ambient 항도 더하지 않음')
    parser.add_argument('--shadow-epsilon', type=float, default=1e-4,
                        help='그림자 광선 양 끝에서 제외할 거리')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='진행 상황 출력 끄기')
    parser.add_argument('--show', action='store_true',
                        help='렌더링 후 이미지 표시')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = RenderSettings(
            width=args.width,
            height=args.height,
            shadow_ambient=not args.no_shadow_ambient,
            shadow_epsilon=args.shadow_epsilon,
            verbose=not args.quiet,
        )
    except ValueError as e:
        parser.error(str(e))

    # 씬 생성
    if not args.quiet:
        print(f"장면 생성 중: {args.scene}")
    try:
        if args.scene == 'default':
            scene_builder = DefaultSceneBuilder()
        else:
            scene_builder = JsonSceneBuilder.from_file(args.scene)
        scene = scene_builder.build_scene()

        # 카메라는 화면 비율에 맞춰 생성
        aspect_ratio = args.width / args.height
        camera = scene_builder.create_camera(aspect_ratio)
    except (OSError, SceneFormatError) as e:
        parser.error(str(e))

    renderer = RendererFactory.create(args.renderer)
    if not args.quiet:
        print(f"렌더러 생성: {args.renderer}")
        print(f"지원 기능: {', '.join(renderer.get_capabilities())}")

    # 렌더링 실행
    start_time = time.time()
    image = renderer.render(scene, camera, settings)
    end_time = time.time()

    # 결과 저장
    image.save(args.output)

    if not args.quiet:
        print(f"이미지 저장: {args.output}")
        elapsed = end_time - start_time
        minutes = int(elapsed // 60)
        seconds = elapsed % 60
        print(f"총 실행 시간: {minutes}분 {seconds:.2f}초")

    if args.show:
        image.show()

    return image


if __name__ == "__main__":
    main()
