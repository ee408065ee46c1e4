"""Catalogue of the errors and warnings reported while checking display lists."""

from __future__ import annotations

import enum


class Severity(enum.Enum):
    """How serious a diagnostic is."""

    ERROR = "error"
    WARNING = "warning"


_E = Severity.ERROR
_W = Severity.WARNING


class Diagnostic(enum.Enum):
    """A named diagnostic with its severity and printf-style message template."""

    def __new__(cls, severity: Severity, template: str) -> "Diagnostic":
        obj = object.__new__(cls)
        obj._value_ = len(cls.__members__) + 1
        obj._severity = severity
        obj._template = template
        return obj

    ADDR_NOT_IN_RDRAM = (_E, "Address not in rdram")
    RANGE_NOT_IN_RDRAM = (_E, "Data does not fit fully in rdram")
    CULLING_BAD_INDICES = (_E, "vn should be greater than v0")
    CULLING_VERTS_OOB = (_E, "Vertices indexed out-of-bounds")
    SEGZERO_NONZERO = (_E, "Assigning segment 0 to something other than 0x00000000")
    INVALID_SEGMENT_NUM = (_E, "Invalid segment number")
    INVALID_SEGMENT_NUM_REL = (_E, "Invalid relative segment number")
    MTX_PUSHED_TO_PROJECTION = (_E, "Cannot push to the projection matrix stack")
    MTX_STACK_OVERFLOW = (_E, "Matrix stack overflow")
    MUL_PROJECTION_UNSET = (_E, "Multiplying a projection matrix when no projection matrix was loaded")
    MUL_MODELVIEW_UNSET = (_E, "Multiplying a modelview matrix when no modelview matrix was loaded")
    SCISSOR_TOO_WIDE = (_E, "Scissor region is too wide for color image")
    SCISSOR_START_INVALID = (_E, "Scissor region start address not in RDRAM")
    SCISSOR_END_INVALID = (_E, "Scissor region end address not in RDRAM")
    INVALID_CIMG_FMT = (_E, "Invalid image format")
    BAD_CIMG_ALIGNMENT = (_E, "Color image alignment must be 64-byte")
    INVALID_CIMG_FMTSIZ = (_E, "Bad format for color image, should be RGBA16, RGBA32 or I8")
    BAD_ZIMG_ALIGNMENT = (_E, "Depth image alignment must be 64-byte")
    INVALID_TIMG_FMT = (_E, "Invalid texture image format")
    INVALID_TIMG_FMTSIZ = (_E, "Invalid texture image format/size combination")
    VTX_LOADING_ZERO = (_E, "Vertex count cannot be zero")
    VTX_LOADING_TOO_MANY = (_E, "Loading too many vertices")
    VTX_CACHE_OVERFLOW = (_E, "Loading %d vertices at position %d overflows the vertex cache")
    VTX_CACHE_UNDERFLOW = (_E, "Loading vertices at position %d is out of bounds of the vertex cache")
    FILLMODE_4B = (_E, "Rendering primitives to a 4-bit color image is prohibited in FILL mode")
    COPYMODE_32B = (_E, "Rendering primitives to a 32-bit color image is prohibited in COPY mode")
    SCISSOR_UNSET = (_E, "Scissor must be set before rendering primitives")
    CIMG_UNSET = (_E, "Color image must be set before rendering primitives")
    FILLRECT_FILLCOLOR_UNSET = (_E, "Filling a rectangle without ever setting the fill color")
    CC_SHADE_INVALID = (_E, "Shade used in CC cycle %d %s input when %s")
    CC_TEXEL_WITH_FILLRECT = (_E, "%s used in CC cycle %d %s input when rendering fill rectangle")
    CC_SHADE_ALPHA_INVALID = (_E, "Shade alpha used as blender cycle %d input when %s")
    ZS_PIXEL_SET_WITHOUT_G_ZBUFFER = (_E, "Per-pixel depth source (G_ZS_PIXEL) is set but G_ZBUFFER is unset")
    ZSRC_INVALID = (
        _E,
        "Per-pixel depth source is only available to triangles, either disable z-buffering or set G_ZS_PRIM in "
        "othermodes",
    )
    CC_COMBINED_IN_C1 = (_E, "COMBINED input selected for CC 1-Cycle %s")
    CC_COMBINED_ALPHA_IN_C1 = (_E, "COMBINED_ALPHA input selected for CC 1-Cycle RGB")
    CC_COMBINED_IN_C2_C1 = (_E, "COMBINED input selected for CC 2-Cycle Cycle 1 %s")
    CC_COMBINED_ALPHA_IN_C2_C1 = (_E, "COMBINED_ALPHA input selected for CC 2-Cycle Cycle 1 RGB")
    FILLMODE_CIMG_ZIMG_RD_PER_PIXEL = (_E, "Color and depth image reading is prohibited in FILL mode")
    FILLMODE_ZIMG_WR_PER_PIXEL = (_E, "Per-pixel depth image updates are prohibited in FILL mode")
    COPYMODE_CIMG_ZIMG_RD_PER_PIXEL = (_E, "Color and depth image reading is prohibited in COPY mode")
    COPYMODE_ZIMG_WR_PER_PIXEL = (_E, "Per-pixel depth image updates are prohibited in COPY mode")
    COPYMODE_AA = (_E, "Anti-aliasing is unavailable in COPY mode")
    COPYMODE_BL_SET = (_E, "Blender pipeline stages are skipped in COPY mode")
    COPYMODE_TEXTURE_FILTER = (_E, "Texture filtering is unavailable in COPY mode")
    TILEDESC_BAD = (_E, "Bad tile index %d")
    TILEDESC_USED_BUT_NOT_SET = (_W, "Tile %d used for rendering but was never set")
    CI_RENDER_TILE_NO_TLUT = (
        _E,
        "Render tile %d is color-indexed but TLUT mode was not enabled in other modes before drawing",
    )
    NO_CI_RENDER_TILE_TLUT = (
        _E,
        "Render tile %d is not color-indexed but TLUT mode was enabled in other modes before drawing",
    )
    COPYMODE_MISMATCH_8B = (_E, "4b and 8b images can only be copied to an 8b color image")
    COPYMODE_MISMATCH_16B = (_E, "16b images can only be copied to a 16b color image")
    TRI_VTX_OOB = (_E, "triangle %d indexed out of bounds vertices")
    BAD_TIMG_ALIGNMENT = (_E, "Texture image alignment will hang the RDP")
    LOADBLOCK_TOO_MANY_TEXELS = (_E, "LoadBlock only allows loading up to 2048 texels")
    TIMG_LOAD_4B = (_E, "Loading with a 4-bit texture image is unsupported")
    TIMG_TILE_LOAD_NONMATCHING = (_E, "Texture image and texture tile format/size do not match during load operation")
    TLUT_TOO_LARGE = (_E, "TLUTs can be at most 256 colors")
    TLUT_BAD_FMT = (_E, "TLUT format should be RGBA16 or IA16")
    TLUT_BAD_TMEM_ADDR = (_E, "A TLUT must be loaded into the high half of TMEM")
    TLUT_BAD_COORDS = (_E, "LoadTLUT loads nothing (on hardware, crashes on emulator) for lrt > ult")
    TIMG_BAD_TMEM_ADDR = (_E, "format %s requires address in low TMEM (< 0x800)")
    SCISSOR_REGION_EMPTY = (_E, "Scissor region is empty")
    MODIFYVTX_OOB = (_E, "Indexing out of bounds vertex")
    MTX_POP_NOT_MODELVIEW = (_E, "Can only pop from the modelview matrix stack")
    MTX_STACK_UNDERFLOW = (_E, "Matrix stack underflow")
    TEXRECT_PERSP_CORRECT = (_E, "Rectangles rendered with texture perspective correction")
    DL_STACK_OVERFLOW = (_E, "Display list stack overflow")
    INVALID_GFX_CMD = (_E, "Invalid gfx commands encountered")
    LOAD_UNRECOGNIZED_UCODE = (_E, "Loading unrecognized ucode")
    TRI_IN_FILLMODE = (_E, "Rendering triangles in fillmode is very likely to crash")
    LTB_INVAID_WIDTH = (_E, "Load texture block invalid width")
    LTB_DXT_CORRUPTION = (_E, "Load texture block dxt corruption")
    FULLSYNC_SENT = (_E, "DPFullSync should always be the last RDP command executed in a task")
    UNMATCHED_DISP = (_E, "Unmatched CloseDisps")
    MISSING_PIPESYNC = (_W, "Missing pipesync")
    MISSING_LOADSYNC = (_W, "Missing loadsync")
    MISSING_TILESYNC = (_W, "Missing tilesync")
    SUPERFLUOUS_PIPESYNC = (_W, "Superfluous pipesync")
    SUPERFLUOUS_LOADSYNC = (_W, "Superfluous loadsync")
    SUPERFLUOUS_TILESYNC = (_W, "Superfluous tilesync")
    UNSET_SEGMENT = (_W, "Using segment %d before it was assigned")
    UNK_DL_VARIANT = (_W, "Unknown display list command variant, will act as %s")
    UNK_NOOP_TAG3 = (_W, "Unknown gsDPNoOpTag3 variant, possibly garbage data")
    CULLING_BAD_VERTS = (_W, "Volume culling references vertices that were not loaded in the last batch")
    DANGEROUS_TEXTURE_ALIGNMENT = (
        _W,
        "texture image is not 8-byte aligned; this has the potential to hang the "
        "RDP, it is recommended to align textures to 8 bytes",
    )
    BLENDER_SET_BUT_UNUSED = (
        _W,
        "Blend formula is configured however the blender is not used as both AA_EN and FORCE_BL are unset",
    )
    BLENDER_STAGES_DIFFER_1CYC = (
        _W,
        "Blender configuration differs between stages in 1-Cycle mode, first cycle configuration is ignored",
    )
    CC_STAGES_DIFFER_1CYC = (
        _W,
        "Color combiner configuration differs between stages in 1-Cycle mode, first cycle configuration is ignored",
    )
    CC_TEXEL1_RGB_1CYC = (
        _W,
        "TEXEL1 input selected for CC 1-Cycle RGB, this reads the next pixel TEXEL0 instead of the current pixel "
        "TEXEL1",
    )
    CC_TEXEL1_ALPHA_1CYC = (
        _W,
        "TEXEL1 input selected for CC 1-Cycle Alpha, this reads the next pixel TEXEL0 instead of the current pixel "
        "TEXEL1",
    )
    CC_TEXEL1_RGBA_1CYC = (_W, "TEXEL1_ALPHA input selected for CC 1-Cycle RGB")
    CC_TEXEL1_RGB_C2_2CYC = (
        _W,
        "TEXEL1 input selected for CC Cycle 2 RGB, this reads the next pixel TEXEL0 instead of the current pixel "
        "TEXEL1",
    )
    CC_TEXEL1_ALPHA_C2_2CYC = (
        _W,
        "TEXEL1 input selected for CC Cycle 2 Alpha, this reads the next pixel TEXEL0 instead of the current pixel "
        "TEXEL1",
    )
    CC_TEXEL1_RGBA_C2_2CYC = (
        _W,
        "TEXEL1_ALPHA input selected for CC Cycle 2 RGB, this reads the next pixel "
        "TEXEL0_ALPHA instead of the current pixel TEXEL1_ALPHA",
    )
    TRI_LEECHING_VERTS = (_W, "triangle %d references vertices that were not loaded in the last batch")
    TRI_TXTR_NOPERSP = (_W, "Textured triangles rendered without texture perspective correction")
    TEX_CI8_NONZERO_PAL = (_W, "Palette is non-zero for CI8 tile descriptor, will be treated as 0")
    RDP_LOG2_INACCURATE = (
        _W,
        "The log2 that RDP hardware computes for dz does not agree with the true log2 of dz, inaccuracy may result.",
    )
    TEXRECT_IN_FILLMODE = (_W, "Rendering textured rectangles in fill mode act like filled rectangles")
    CVG_SAVE_NO_IM_RD = (_W, "cvg_dst mode set to SAVE but IM_RD is not set, will behave as if cvg_dst was set to FULL")
    CI_CIMG_FMTSIZ = (
        _W,
        "CI8 is technically invalid for color images, it behaves the same as I8 which better describes the behavior",
    )
    CC_COMBINED_IN_C_SLOT = (
        _W,
        "Using COMBINED in the C input of the combiner is discouraged: the "
        "C input is more prone to overflow than the other inputs",
    )

    @property
    def severity(self) -> Severity:
        """Whether this diagnostic is an error or a warning."""
        return self._severity

    @property
    def template(self) -> str:
        """The printf-style message template."""
        return self._template

    def format(self, *args: object) -> str:
        """Fill the message template with ``args``.

        Raises TypeError if the number or kinds of arguments do not fit the template.
        """
        return self._template % args

    def raise_error(self, *args: object) -> None:
        """Raise a DiagnosticError for this diagnostic."""
        raise DiagnosticError(self, *args)


class DiagnosticError(Exception):
    """An exception carrying a diagnostic and its formatted message."""

    def __init__(self, diagnostic: Diagnostic, *args: object) -> None:
        self.diagnostic = diagnostic
        self.params = args
        self.message = diagnostic.format(*args)
        super().__init__(self.message)

    @property
    def severity(self) -> Severity:
        return self.diagnostic.severity


def errors() -> list[Diagnostic]:
    """All error diagnostics in definition order."""
    return [d for d in Diagnostic if d.severity is Severity.ERROR]


def warnings() -> list[Diagnostic]:
    """All warning diagnostics in definition order."""
    return [d for d in Diagnostic if d.severity is Severity.WARNING]