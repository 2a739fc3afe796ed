"""WebGPU feature and texture format names and their display strings."""

from __future__ import annotations

import enum
from typing import Any

__all__ = [
    "FeatureName",
    "TextureFormat",
    "feature_name_to_string",
    "texture_format_to_string",
]

_FEATURE_PREFIX = "WGPUFeatureName_"
_TEXTURE_FORMAT_PREFIX = "WGPUTextureFormat_"

_FEATURE_NAMES = (
    "CoreFeaturesAndLimits",
    "DepthClipControl",
    "Depth32FloatStencil8",
    "TextureCompressionBC",
    "TextureCompressionBCSliced3D",
    "TextureCompressionETC2",
    "TextureCompressionASTC",
    "TextureCompressionASTCSliced3D",
    "TimestampQuery",
    "IndirectFirstInstance",
    "ShaderF16",
    "RG11B10UfloatRenderable",
    "BGRA8UnormStorage",
    "Float32Filterable",
    "Float32Blendable",
    "ClipDistances",
    "DualSourceBlending",
    "Subgroups",
    "TextureFormatsTier1",
    "TextureFormatsTier2",
    "PrimitiveIndex",
    "DawnInternalUsages",
    "DawnMultiPlanarFormats",
    "DawnNative",
    "ChromiumExperimentalTimestampQueryInsidePasses",
    "ImplicitDeviceSynchronization",
    "TransientAttachments",
    "MSAARenderToSingleSampled",
    "D3D11MultithreadProtected",
    "ANGLETextureSharing",
    "PixelLocalStorageCoherent",
    "PixelLocalStorageNonCoherent",
    "Unorm16TextureFormats",
    "Snorm16TextureFormats",
    "MultiPlanarFormatExtendedUsages",
    "MultiPlanarFormatP010",
    "HostMappedPointer",
    "MultiPlanarRenderTargets",
    "MultiPlanarFormatNv12a",
    "FramebufferFetch",
    "BufferMapExtendedUsages",
    "AdapterPropertiesMemoryHeaps",
    "AdapterPropertiesD3D",
    "AdapterPropertiesVk",
    "R8UnormStorage",
    "DawnFormatCapabilities",
    "DawnDrmFormatCapabilities",
    "Norm16TextureFormats",
    "MultiPlanarFormatNv16",
    "MultiPlanarFormatNv24",
    "MultiPlanarFormatP210",
    "MultiPlanarFormatP410",
    "SharedTextureMemoryVkDedicatedAllocation",
    "SharedTextureMemoryAHardwareBuffer",
    "SharedTextureMemoryDmaBuf",
    "SharedTextureMemoryOpaqueFD",
    "SharedTextureMemoryZirconHandle",
    "SharedTextureMemoryDXGISharedHandle",
    "SharedTextureMemoryD3D11Texture2D",
    "SharedTextureMemoryIOSurface",
    "SharedTextureMemoryEGLImage",
    "SharedFenceVkSemaphoreOpaqueFD",
    "SharedFenceSyncFD",
    "SharedFenceVkSemaphoreZirconHandle",
    "SharedFenceDXGISharedHandle",
    "SharedFenceMTLSharedEvent",
    "SharedBufferMemoryD3D12Resource",
    "StaticSamplers",
    "YCbCrVulkanSamplers",
    "ShaderModuleCompilationOptions",
    "DawnLoadResolveTexture",
    "DawnPartialLoadResolveTexture",
    "MultiDrawIndirect",
    "DawnTexelCopyBufferRowAlignment",
    "FlexibleTextureViews",
    "ChromiumExperimentalSubgroupMatrix",
    "SharedFenceEGLSync",
    "DawnDeviceAllocatorControl",
    "TextureComponentSwizzle",
    "ChromiumExperimentalBindless",
    "AdapterPropertiesWGPU",
    "Force32",
)

_TEXTURE_FORMAT_NAMES = (
    "Undefined",
    "R8Unorm",
    "R8Snorm",
    "R8Uint",
    "R8Sint",
    "R16Unorm",
    "R16Snorm",
    "R16Uint",
    "R16Sint",
    "R16Float",
    "RG8Unorm",
    "RG8Snorm",
    "RG8Uint",
    "RG8Sint",
    "R32Float",
    "R32Uint",
    "R32Sint",
    "RG16Unorm",
    "RG16Snorm",
    "RG16Uint",
    "RG16Sint",
    "RG16Float",
    "RGBA8Unorm",
    "RGBA8UnormSrgb",
    "RGBA8Snorm",
    "RGBA8Uint",
    "RGBA8Sint",
    "BGRA8Unorm",
    "BGRA8UnormSrgb",
    "RGB10A2Uint",
    "RGB10A2Unorm",
    "RG11B10Ufloat",
    "RGB9E5Ufloat",
    "RG32Float",
    "RG32Uint",
    "RG32Sint",
    "RGBA16Unorm",
    "RGBA16Snorm",
    "RGBA16Uint",
    "RGBA16Sint",
    "RGBA16Float",
    "RGBA32Float",
    "RGBA32Uint",
    "RGBA32Sint",
    "Stencil8",
    "Depth16Unorm",
    "Depth24Plus",
    "Depth24PlusStencil8",
    "Depth32Float",
    "Depth32FloatStencil8",
    "BC1RGBAUnorm",
    "BC1RGBAUnormSrgb",
    "BC2RGBAUnorm",
    "BC2RGBAUnormSrgb",
    "BC3RGBAUnorm",
    "BC3RGBAUnormSrgb",
    "BC4RUnorm",
    "BC4RSnorm",
    "BC5RGUnorm",
    "BC5RGSnorm",
    "BC6HRGBUfloat",
    "BC6HRGBFloat",
    "BC7RGBAUnorm",
    "BC7RGBAUnormSrgb",
    "ETC2RGB8Unorm",
    "ETC2RGB8UnormSrgb",
    "ETC2RGB8A1Unorm",
    "ETC2RGB8A1UnormSrgb",
    "ETC2RGBA8Unorm",
    "ETC2RGBA8UnormSrgb",
    "EACR11Unorm",
    "EACR11Snorm",
    "EACRG11Unorm",
    "EACRG11Snorm",
    "ASTC4x4Unorm",
    "ASTC4x4UnormSrgb",
    "ASTC5x4Unorm",
    "ASTC5x4UnormSrgb",
    "ASTC5x5Unorm",
    "ASTC5x5UnormSrgb",
    "ASTC6x5Unorm",
    "ASTC6x5UnormSrgb",
    "ASTC6x6Unorm",
    "ASTC6x6UnormSrgb",
    "ASTC8x5Unorm",
    "ASTC8x5UnormSrgb",
    "ASTC8x6Unorm",
    "ASTC8x6UnormSrgb",
    "ASTC8x8Unorm",
    "ASTC8x8UnormSrgb",
    "ASTC10x5Unorm",
    "ASTC10x5UnormSrgb",
    "ASTC10x6Unorm",
    "ASTC10x6UnormSrgb",
    "ASTC10x8Unorm",
    "ASTC10x8UnormSrgb",
    "ASTC10x10Unorm",
    "ASTC10x10UnormSrgb",
    "ASTC12x10Unorm",
    "ASTC12x10UnormSrgb",
    "ASTC12x12Unorm",
    "ASTC12x12UnormSrgb",
    "R8BG8Biplanar420Unorm",
    "R10X6BG10X6Biplanar420Unorm",
    "R8BG8A8Triplanar420Unorm",
    "R8BG8Biplanar422Unorm",
    "R8BG8Biplanar444Unorm",
    "R10X6BG10X6Biplanar422Unorm",
    "R10X6BG10X6Biplanar444Unorm",
    "External",
    "Force32",
)

FeatureName = enum.Enum(
    "FeatureName",
    [(name, _FEATURE_PREFIX + name) for name in _FEATURE_NAMES],
    module=__name__,
    qualname="FeatureName",
)
FeatureName.__doc__ = "A WebGPU device feature; each value is its full display name."

TextureFormat = enum.Enum(
    "TextureFormat",
    [(name, _TEXTURE_FORMAT_PREFIX + name) for name in _TEXTURE_FORMAT_NAMES],
    module=__name__,
    qualname="TextureFormat",
)
TextureFormat.__doc__ = "A WebGPU texture format; each value is its full display name."


def _lookup(enum_type: type[enum.Enum], item: Any) -> enum.Enum | None:
    if isinstance(item, enum_type):
        return item
    if isinstance(item, str):
        if item in enum_type.__members__:
            return enum_type[item]
        try:
            return enum_type(item)
        except ValueError:
            return None
    return None


def feature_name_to_string(feature: Any) -> str:
    """Return the display name of a feature, or a fallback for unknown input.

    Accepts a :class:`FeatureName` member, its short name or its full name.
    """
    member = _lookup(FeatureName, feature)
    if member is None:
        return "Unknown WGPUFeatureName"
    return member.value


def texture_format_to_string(texture_format: Any) -> str:
    """Return the display name of a texture format, or a fallback for unknown input.

    Accepts a :class:`TextureFormat` member, its short name or its full name.
    """
    member = _lookup(TextureFormat, texture_format)
    if member is None:
        return "Unknown WGPUTextureFormat"
    return member.value